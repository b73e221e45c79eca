#!/usr/bin/env python3
"""
Settings for the xliffkit command line.

Settings come from a YAML file (an explicit path, or .xliffkit.yaml in the
working directory) and are overridden by command-line flags:

```yaml
source_language: en-US
target_language: fr-FR
xliff_version: "2.0"
pretty: true
use_target_as_value: true
include_untranslated: false
log_level: INFO
```
"""

import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .enums import XliffVersion
from .errors import FormatError, NotFoundError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".xliffkit.yaml"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Conversion defaults."""
    source_language: str = "en-US"
    target_language: Optional[str] = None
    xliff_version: str = XliffVersion.V1_2.value
    pretty: bool = True
    use_target_as_value: bool = True
    include_untranslated: bool = True
    log_level: str = "WARNING"

    @property
    def version(self) -> XliffVersion:
        return XliffVersion.from_string(self.xliff_version)

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: str = "<dict>") -> "Settings":
        """
        Create settings from a mapping.

        Raises:
            FormatError: Unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(map(str, set(data) - known))
        if unknown:
            raise FormatError(f"Unknown settings: {', '.join(unknown)}", source)

        # YAML reads 2.0 as a float
        if 'xliff_version' in data:
            data = {**data, 'xliff_version': str(data['xliff_version'])}

        settings = cls(**data)
        try:
            XliffVersion.from_string(settings.xliff_version)
        except ValueError as e:
            raise FormatError(str(e), source) from e
        if str(settings.log_level).upper() not in LOG_LEVELS:
            raise FormatError(f"Unknown log level: {settings.log_level}", source)
        return settings

    def merged(self, **overrides: Any) -> "Settings":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings from YAML.

    Args:
        path: Settings file; when None, .xliffkit.yaml in the working
            directory is used if it exists

    Returns:
        Settings (defaults when no file is found and none was requested)

    Raises:
        NotFoundError: An explicit path does not exist
        FormatError: File is not valid YAML or contains unknown settings
    """
    if path is None:
        default = Path.cwd() / DEFAULT_CONFIG_FILE
        if not default.is_file():
            return Settings()
        path = default

    path = Path(path)
    if not path.is_file():
        raise NotFoundError("Settings file not found", str(path))

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise FormatError(f"Invalid YAML: {e}", str(path)) from e

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise FormatError("Settings root must be a mapping", str(path))

    logger.debug("Loaded settings from %s", path)
    return Settings.from_dict(data, str(path))
