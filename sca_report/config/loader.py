"""Reporter configuration discovery and loading."""
from __future__ import annotations

from pathlib import Path

from sca_report.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from sca_report.documents import DocumentReader
from sca_report.exceptions import ConfigurationError
from sca_report.models.config import ReporterConfig

_reader = DocumentReader("configuration file", ConfigurationError)


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the first of the default configuration files present in a directory.

    Args:
        start_dir: Directory to look in, the current working directory if omitted.
    """
    directory = start_dir or Path.cwd()
    candidates = (directory / name for name in DEFAULT_CONFIG_NAMES)
    return next((candidate for candidate in candidates if candidate.exists()), None)


def load_config_file(path: Path) -> ReporterConfig:
    """Load the reporter configuration stored in a file.

    A file without content, or with comments only, yields the default
    configuration.

    Raises:
        ConfigurationError: If the file cannot be read or parsed, or does not
            describe a valid configuration.
    """
    data = _reader.read(path)
    if data is None:
        return get_default_config()
    return _reader.validate(ReporterConfig, data, path)


def load_config(config_path: str | None = None) -> ReporterConfig:
    """Load the configuration to report with.

    An explicit path wins over a configuration file discovered in the current
    working directory. Without either, the defaults are used.

    Raises:
        ConfigurationError: If the chosen configuration file is invalid.
    """
    path = Path(config_path) if config_path is not None else find_config_file()
    if path is None:
        return get_default_config()
    return load_config_file(path)
