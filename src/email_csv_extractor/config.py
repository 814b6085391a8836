"""Configuration loading for email extraction."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True)
class PathConfig:
    """Input and result directories."""

    data_dir: str = "data"
    result_dir: str = "data/result"


@dataclass(slots=True)
class OutputFilenames:
    """Names of the four artifacts written by one run."""

    proper_emails: str = "proper_emails.csv"
    wrong_emails: str = "wrong_emails.csv"
    summary_csv: str = "validaion_summary.csv"
    summary_txt: str = "validaion_summary.txt"


@dataclass(slots=True)
class OutputConfig:
    """Report output configuration."""

    filenames: OutputFilenames = field(default_factory=OutputFilenames)
    summary_delimiter: str = ";"


@dataclass(slots=True)
class AppConfig:
    """Application configuration object."""

    paths: PathConfig = field(default_factory=PathConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


DEFAULT_CONFIG_PATH = Path("config/default_config.json")


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load configuration from JSON file.

    Args:
        path: Custom config path. If omitted, uses the default config when it
            exists and built-in defaults otherwise.

    Returns:
        Parsed AppConfig object.

    Raises:
        FileNotFoundError: If an explicit config file does not exist.
        ValueError: If the file or one of its sections is not a JSON object, or
            the summary delimiter is not a single character.
    """

    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return AppConfig()
        config_path = DEFAULT_CONFIG_PATH
    else:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

    data = json.loads(config_path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config must be a JSON object")

    path_data = _section(data, "paths")
    defaults = PathConfig()
    paths = PathConfig(
        data_dir=str(path_data.get("data_dir", defaults.data_dir)),
        result_dir=str(path_data.get("result_dir", defaults.result_dir)),
    )

    output_data = _section(data, "output")
    default_names = OutputFilenames()
    filenames = OutputFilenames(
        proper_emails=str(output_data.get("proper_emails", default_names.proper_emails)),
        wrong_emails=str(output_data.get("wrong_emails", default_names.wrong_emails)),
        summary_csv=str(output_data.get("summary_csv", default_names.summary_csv)),
        summary_txt=str(output_data.get("summary_txt", default_names.summary_txt)),
    )
    summary_delimiter = output_data.get("summary_delimiter", ";")
    if not isinstance(summary_delimiter, str) or len(summary_delimiter) != 1:
        raise ValueError("Config output.summary_delimiter must be a single character")
    output = OutputConfig(filenames=filenames, summary_delimiter=summary_delimiter)

    return AppConfig(paths=paths, output=output)


def _section(data: dict, name: str) -> dict:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a JSON object")
    return section
