import pytest
from pydantic import ValidationError

from api_doc_report.parser.base import ApiOperation, Diagnostic, EndpointRecord, Param, RequestBody


class TestParam:
    def test_create_minimal_param(self):
        p = Param(name="id", location="path")
        assert p.name == "id"
        assert p.param_type is None
        assert p.description is None


class TestApiOperation:
    def test_create_minimal_operation(self):
        op = ApiOperation(method="get", path="/api/users")
        assert op.parameters == []
        assert op.request_body is None
        assert op.responses == {}

    def test_create_operation_with_body(self):
        op = ApiOperation(
            method="post",
            path="/api/users",
            request_body=RequestBody(description="User payload", content_types=["application/json"]),
            responses={"201": "Created"},
        )
        assert op.request_body.content_types == ["application/json"]


class TestDiagnostic:
    def test_str_includes_pointer(self):
        d = Diagnostic(message="Parameter has no 'name'", pointer="#/paths/~1users/get/parameters/0")
        assert str(d) == "#/paths/~1users/get/parameters/0: Parameter has no 'name'"


class TestEndpointRecord:
    def test_record_is_immutable(self):
        record = EndpointRecord(method="GET", path="/users", description="List users", response="No response info")
        with pytest.raises(ValidationError):
            record.method = "POST"

    def test_parameters_default_empty(self):
        record = EndpointRecord(method="GET", path="/users", description="List users", response="No response info")
        assert record.parameters == ()
