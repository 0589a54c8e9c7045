"""Run configuration: default paths and an optional YAML/JSON config file.

Precedence, highest first: CLI flags, config file, built-in defaults.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError

from api_doc_report.errors import ConfigError

DEFAULT_INPUT_NAME = "swagger.json"
DEFAULT_OUTPUT_NAME = "ApiDocumentation.docx"


def documents_dir() -> Path:
    """Return the user's documents directory, or the home directory if there is none."""
    docs = Path.home() / "Documents"
    return docs if docs.is_dir() else Path.home()


class ReportConfig(BaseModel):
    """Resolved settings for one run."""

    input_path: Path
    output_path: Path
    strict: bool = False


class _FileConfig(BaseModel):
    input: Path | None = None
    output: Path | None = None
    strict: bool | None = None


def load_config_file(config_path: Path) -> dict:
    """Read a config file and return the settings it declares.

    Relative paths in the file are resolved against the file's directory.
    """
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid config file {config_path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    try:
        parsed = _FileConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file {config_path}: {exc}") from exc

    settings = {}
    base = config_path.parent
    if parsed.input is not None:
        settings["input_path"] = base / parsed.input
    if parsed.output is not None:
        settings["output_path"] = base / parsed.output
    if parsed.strict is not None:
        settings["strict"] = parsed.strict
    return settings


def resolve_config(
    input_path: Path | None = None,
    output_path: Path | None = None,
    strict: bool | None = None,
    config_path: Path | None = None,
) -> ReportConfig:
    """Merge CLI values, an optional config file and the defaults."""
    docs = documents_dir()
    settings = {
        "input_path": docs / DEFAULT_INPUT_NAME,
        "output_path": docs / DEFAULT_OUTPUT_NAME,
        "strict": False,
    }
    if config_path is not None:
        settings.update(load_config_file(config_path))

    cli_values = {"input_path": input_path, "output_path": output_path, "strict": strict}
    settings.update({k: v for k, v in cli_values.items() if v is not None})
    return ReportConfig(**settings)
