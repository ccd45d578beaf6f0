"""
Runner configuration.

A RunnerConfig can come from a YAML file, from command line options, or
both (options win). Example file:

    lessons: [console, data-types]
    format: text
    color: false
    output: transcript.txt
    log_level: INFO
    report: true
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Mapping, Optional

import yaml

from primer.lessons import get_lesson


FORMATS = ("text", "json", "yaml")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised for unreadable or invalid configuration."""


@dataclass
class RunnerConfig:
    lessons: List[str] = field(default_factory=list)
    format: str = "text"
    color: bool = False
    output: Optional[str] = None
    log_level: str = "WARNING"
    report: bool = False

    def validate(self) -> None:
        """Raise ConfigError on the first invalid value."""
        if not isinstance(self.lessons, list) or not all(isinstance(n, str) for n in self.lessons):
            raise ConfigError("'lessons' must be a list of lesson names")
        for name in self.lessons:
            try:
                get_lesson(name)
            except KeyError as exc:
                raise ConfigError(str(exc)) from exc
        if self.format not in FORMATS:
            raise ConfigError(f"'format' must be one of {', '.join(FORMATS)}, got {self.format!r}")
        if not isinstance(self.color, bool):
            raise ConfigError("'color' must be true or false")
        if self.output is not None and not isinstance(self.output, str):
            raise ConfigError("'output' must be a path")
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"'log_level' must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )
        if not isinstance(self.report, bool):
            raise ConfigError("'report' must be true or false")

    def merged(self, overrides: Mapping[str, Any]) -> "RunnerConfig":
        """Return a copy with every non-None override applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        config = replace(self, **values)
        config.validate()
        return config


_KNOWN_KEYS = {f.name for f in fields(RunnerConfig)}


def config_from_dict(d: Optional[Dict[str, Any]]) -> RunnerConfig:
    if d is None:
        d = {}
    if not isinstance(d, dict):
        raise ConfigError("Configuration must be a mapping")
    unknown = sorted(set(d) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown configuration key(s): {', '.join(map(str, unknown))}")
    config = RunnerConfig(**d)
    config.validate()
    return config


def load_config(path: str) -> RunnerConfig:
    """
    Load a RunnerConfig from a YAML file.

    Raises:
        ConfigError: If the file cannot be read or holds invalid settings
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path!r}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path!r}: {exc}") from exc
    return config_from_dict(data)
