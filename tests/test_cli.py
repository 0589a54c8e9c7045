from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner
from docx import Document

from api_doc_report import config
from api_doc_report.cli import main
from api_doc_report.exit_codes import (
    EXIT_INPUT_NOT_FOUND,
    EXIT_OUTPUT_WRITE_ERROR,
    EXIT_SPEC_PARSE_ERROR,
)

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliRender:
    def test_render_petstore(self, tmp_path):
        output_file = tmp_path / "api.docx"
        runner = CliRunner()
        result = runner.invoke(main, ["render", str(FIXTURES / "petstore.json"), "-o", str(output_file)])

        assert result.exit_code == 0
        assert "Found 5 endpoints." in result.output
        assert f"Documentation generated at: {output_file.resolve()}" in result.output
        assert output_file.exists()

    def test_render_uses_default_paths(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "documents_dir", lambda: tmp_path)
        (tmp_path / "swagger.json").write_text((FIXTURES / "swagger2.json").read_text())

        runner = CliRunner()
        result = runner.invoke(main, ["render"])

        assert result.exit_code == 0
        doc = Document(str(tmp_path / "ApiDocumentation.docx"))
        assert "POST /users" in [p.text for p in doc.paragraphs]

    def test_render_with_config_file(self, tmp_path):
        cfg = tmp_path / "report.yaml"
        cfg.write_text(f"input: {FIXTURES / 'petstore.json'}\noutput: out.docx\n")

        runner = CliRunner()
        result = runner.invoke(main, ["render", "--config", str(cfg)])

        assert result.exit_code == 0
        assert (tmp_path / "out.docx").exists()

    def test_missing_input(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["render", str(tmp_path / "nope.json"), "-o", str(tmp_path / "a.docx")])

        assert result.exit_code == EXIT_INPUT_NOT_FOUND
        assert "Specification file not found" in result.output

    def test_strict_rejects_broken_document(self, tmp_path):
        output_file = tmp_path / "api.docx"
        runner = CliRunner()
        result = runner.invoke(main, ["render", str(FIXTURES / "broken.json"), "-o", str(output_file), "--strict"])

        assert result.exit_code == EXIT_SPEC_PARSE_ERROR
        assert not output_file.exists()

    def test_lenient_renders_broken_document(self, tmp_path):
        output_file = tmp_path / "api.docx"
        runner = CliRunner()
        result = runner.invoke(main, ["render", str(FIXTURES / "broken.json"), "-o", str(output_file)])

        assert result.exit_code == 0
        assert "Found 1 endpoints." in result.output

    def test_unwritable_output(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(
            main, ["render", str(FIXTURES / "petstore.json"), "-o", str(tmp_path / "missing" / "api.docx")]
        )

        assert result.exit_code == EXIT_OUTPUT_WRITE_ERROR
        assert "Cannot write report" in result.output

    @patch("api_doc_report.cli.ReportRenderer")
    def test_renderer_receives_api_title(self, MockRenderer, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["render", str(FIXTURES / "petstore.json"), "-o", str(tmp_path / "a.docx")])

        assert result.exit_code == 0
        MockRenderer.assert_called_once_with(api_title="Petstore API")
        records, output = MockRenderer.return_value.render.call_args.args
        assert len(records) == 5
        assert output == tmp_path / "a.docx"


class TestCliEndpoints:
    def test_lists_endpoints_in_order(self):
        runner = CliRunner()
        result = runner.invoke(main, ["endpoints", str(FIXTURES / "swagger2.json")])

        assert result.exit_code == 0
        assert result.output.splitlines() == ["POST /users", "PUT /users/{id}"]
