"""
Configuration for taxonomy construction.

Build options can be given directly or loaded from a YAML file such as::

    build:
      child_selection: contiguous
    logging:
      level: DEBUG
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Union

import yaml


class ChildSelection(Enum):
    """Strategies for picking the branches of a taxon out of an element."""
    # every attributed child element, anything else is skipped
    ALL = "all"
    # attributed child elements up to the first entry that is not one
    CONTIGUOUS = "contiguous"

    @classmethod
    def from_value(cls, value: Union[str, "ChildSelection"]) -> "ChildSelection":
        if isinstance(value, ChildSelection):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(
                f"Invalid child selection: {value}. Expected one of: {valid}"
            )


class Config:
    """YAML configuration with dot-notation access to nested sections."""

    def __init__(self, config_path: Union[str, Path]):
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(self.config_path, "r") as f:
            self._bind(yaml.safe_load(f) or {})

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "Config":
        """Wrap an already loaded section."""
        section = cls.__new__(cls)
        section.config_path = None
        section._bind(data)
        return section

    def _bind(self, data: Dict[str, Any]) -> None:
        self._data = data
        for key, value in data.items():
            if isinstance(value, dict):
                value = Config.from_mapping(value)
            setattr(self, key, value)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value with optional default."""
        if key not in self._data:
            return default
        return getattr(self, key)

    def __getitem__(self, key: str) -> Any:
        return getattr(self, key)


@dataclass(frozen=True)
class BuildOptions:
    """Options honoured when a taxonomy is built from an element tree."""
    child_selection: ChildSelection = ChildSelection.ALL
    log_level: str = "INFO"

    @classmethod
    def from_config(cls, config: Config) -> "BuildOptions":
        """Read the ``build`` and ``logging`` sections, falling back to defaults."""
        selection = cls.child_selection
        level = cls.log_level

        build = config.get("build")
        if build is not None:
            selection = build.get("child_selection", selection)

        logging_section = config.get("logging")
        if logging_section is not None:
            level = logging_section.get("level", level)

        return cls(
            child_selection=ChildSelection.from_value(selection),
            log_level=str(level).upper(),
        )

    @classmethod
    def load(cls, config_path: Union[str, Path]) -> "BuildOptions":
        return cls.from_config(Config(config_path))
