from __future__ import annotations

import logging
import os
import re
import sys
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from mediatypes.config._error import ConfigError
from mediatypes.grammar import (
    CASE_CONVERTERS,
    DEFAULT_GRAMMAR,
    MEDIA_TYPE_MATCH_PATTERN,
    MEDIA_TYPE_PARAM_PATTERN,
    Grammar,
)

if sys.version_info < (3, 11):
    import tomli
else:
    import tomllib as tomli

__all__ = ["MediaTypesConfig", "ConfigError", "CONFIG_FILE_NAME"]

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "mediatypes.toml"


@dataclass
class MediaTypesConfig:
    case: str
    match_pattern: str
    parameter_pattern: str
    _config_path: str | None

    __slots__ = ("case", "match_pattern", "parameter_pattern", "_config_path")

    def __init__(
        self,
        *,
        case: str = "lower",
        match_pattern: str | None = None,
        parameter_pattern: str | None = None,
    ) -> None:
        self.case = case
        self.match_pattern = match_pattern or MEDIA_TYPE_MATCH_PATTERN
        self.parameter_pattern = parameter_pattern or MEDIA_TYPE_PARAM_PATTERN
        self._config_path = None

    @property
    def config_path(self) -> str | None:
        """Filesystem path to the loaded configuration file, if any.

        Returns None if using default configuration.
        """
        return self._config_path

    @property
    def grammar(self) -> Grammar:
        """Build the grammar that parsing functions accept via their `grammar` argument."""
        case_converter = CASE_CONVERTERS[self.case]
        if self.match_pattern == MEDIA_TYPE_MATCH_PATTERN and self.parameter_pattern == MEDIA_TYPE_PARAM_PATTERN:
            return DEFAULT_GRAMMAR.with_case_converter(case_converter)
        logger.debug("Using custom media type grammar: %r / %r", self.match_pattern, self.parameter_pattern)
        return Grammar(
            match_regex=_compile(self.match_pattern, "match-pattern"),
            param_regex=_compile(self.parameter_pattern, "parameter-pattern"),
            case_converter=case_converter,
        )

    @classmethod
    def discover(cls) -> MediaTypesConfig:
        """Discover the configuration file.

        Search for 'mediatypes.toml' in the current directory and then in each parent directory,
        stopping when a directory containing a '.git' folder is encountered or the filesystem root is reached.
        If a config file is found, load it; otherwise, return a default configuration.
        """
        current_dir = os.getcwd()
        config_file = None

        while True:
            candidate = os.path.join(current_dir, CONFIG_FILE_NAME)
            if os.path.isfile(candidate):
                config_file = candidate
                break

            # Stop searching if we've reached a git repository root
            git_dir = os.path.join(current_dir, ".git")
            if os.path.isdir(git_dir):
                break

            # Stop if we've reached the filesystem root
            parent = os.path.dirname(current_dir)
            if parent == current_dir:
                break
            current_dir = parent

        if config_file:
            return cls.from_path(config_file)
        return cls()

    @classmethod
    def from_path(cls, path: PathLike | str) -> MediaTypesConfig:
        """Load configuration from a file path."""
        with open(path, encoding="utf-8") as fd:
            config = cls.from_str(fd.read())
            config._config_path = str(Path(path).resolve())
            return config

    @classmethod
    def from_str(cls, data: str) -> MediaTypesConfig:
        """Parse configuration from a string."""
        try:
            parsed = tomli.loads(data)
        except tomli.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML: {exc}") from None
        return cls.from_dict(parsed)

    @classmethod
    def from_dict(cls, data: dict) -> MediaTypesConfig:
        """Create a config instance from a dictionary."""
        from jsonschema.exceptions import ValidationError

        from mediatypes.config._validator import CONFIG_VALIDATOR

        try:
            CONFIG_VALIDATOR.validate(data)
        except ValidationError as exc:
            raise ConfigError.from_validation_error(exc) from None
        config = cls(
            case=data.get("case", "lower"),
            match_pattern=data.get("match-pattern"),
            parameter_pattern=data.get("parameter-pattern"),
        )
        # Fail on load rather than on first use
        _compile(config.match_pattern, "match-pattern")
        _compile(config.parameter_pattern, "parameter-pattern")
        return config


def _compile(pattern: str, name: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ConfigError(f"Invalid regular expression in '{name}': {exc}") from None
