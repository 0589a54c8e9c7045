"""Process exit codes, one per error category.

Referenced by the matching :class:`~api_doc_report.errors.ReportError`
subclass so shell wrappers can tell failures apart without parsing stderr.
"""

EXIT_GENERIC_FAILURE = 1
EXIT_INPUT_NOT_FOUND = 3
EXIT_INPUT_UNREADABLE = 4
EXIT_SPEC_PARSE_ERROR = 5
EXIT_OUTPUT_WRITE_ERROR = 6
