"""Configuration file support for semtag.

This module handles loading and parsing the .semtag.yaml configuration file.
Every section and key is optional. Example:

    # Tag naming
    version:
      prefix: v
      plain: false

    # Default bump scope and the auto scope threshold (percent of lines)
    scope:
      default: auto
      auto_threshold: 10.0

    # Tag creation and push
    tag:
      remote: origin
      push: true
      default_branch: main
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Any
import logging
import yaml

from .resolver import DEFAULT_AUTO_THRESHOLD
from .semver import DEFAULT_PREFIX, Scope

log = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = ".semtag.yaml"


@dataclass
class VersionConfig:
    """Configuration for version naming.

    Attributes:
        prefix: Prefix of version tags ("v" gives tags like "v1.2.0").
        plain: Print and tag versions without the prefix by default.
    """

    prefix: str = DEFAULT_PREFIX
    plain: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "VersionConfig":
        prefix = data.get("prefix", cls.prefix)
        return cls(
            prefix="" if prefix is None else str(prefix),
            plain=bool(data.get("plain", cls.plain)),
        )


@dataclass
class ScopeConfig:
    """Configuration for bump scope selection.

    Attributes:
        default: Scope used when -s/--scope is not given.
        auto_threshold: Changed-line percentage above which the auto scope
            selects a minor bump instead of a patch bump.
    """

    default: Scope = Scope.AUTO
    auto_threshold: float = DEFAULT_AUTO_THRESHOLD

    @classmethod
    def from_dict(cls, data: dict) -> "ScopeConfig":
        default = data.get("default", cls.default)
        try:
            scope = Scope(default)
        except ValueError:
            choices = ", ".join(s.value for s in Scope)
            raise ValueError(f"Invalid default scope '{default}', expected one of: {choices}")

        threshold = data.get("auto_threshold", cls.auto_threshold)
        if not isinstance(threshold, (int, float)) or isinstance(threshold, bool):
            raise ValueError(f"auto_threshold must be a number, got '{threshold}'")

        return cls(default=scope, auto_threshold=float(threshold))


@dataclass
class TagConfig:
    """Configuration for tag creation.

    Attributes:
        remote: Git remote tags are pushed to.
        push: Push new tags to the remote.
        default_branch: Primary branch name. Detected from the repository
            when not set.
    """

    remote: str = "origin"
    push: bool = True
    default_branch: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "TagConfig":
        return cls(
            remote=data.get("remote", cls.remote),
            push=bool(data.get("push", cls.push)),
            default_branch=data.get("default_branch"),
        )


@dataclass
class SemtagConfig:
    """Configuration settings for semtag.

    All settings are optional and have sensible defaults.
    """

    version: VersionConfig = field(default_factory=VersionConfig)
    scope: ScopeConfig = field(default_factory=ScopeConfig)
    tag: TagConfig = field(default_factory=TagConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "SemtagConfig":
        """Create a SemtagConfig from a dictionary.

        Unknown sections are ignored with a warning.

        Raises:
            ValueError: If a section is not a mapping or holds invalid values.
        """
        sections = {}
        for name, section_cls in (
            ("version", VersionConfig),
            ("scope", ScopeConfig),
            ("tag", TagConfig),
        ):
            section_data = data.get(name) or {}
            if not isinstance(section_data, dict):
                raise ValueError(f"Config section '{name}' must be a mapping")
            sections[name] = section_cls.from_dict(section_data)

        for name in data:
            if name not in sections:
                log.warning(f"Ignoring unknown config section '{name}'")

        return cls(**sections)


def load_config(
    config_path: Optional[str] = None, root: Optional[str] = None
) -> SemtagConfig:
    """Load configuration from a YAML file.

    If config_path is explicitly provided and the file doesn't exist, raises an error.
    If config_path is None and the default .semtag.yaml doesn't exist, returns default config.

    Args:
        config_path: Path to the config file, or None to use the default path.
        root: Directory holding the default config file (default: current directory).

    Returns:
        SemtagConfig instance with loaded or default values.

    Raises:
        FileNotFoundError: If config_path is explicitly provided but file doesn't exist.
        yaml.YAMLError: If the config file contains invalid YAML.
        ValueError: If the config file contains invalid values.
    """
    explicit_path = config_path is not None
    path = Path(config_path) if config_path else Path(root or ".") / DEFAULT_CONFIG_PATH

    if not path.exists():
        if explicit_path:
            raise FileNotFoundError(f"Config file not found: {path}")
        return SemtagConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Invalid YAML in config file {path}: {e}")

    # Handle empty file or file with only comments
    if data is None:
        return SemtagConfig()

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a YAML mapping (dictionary)")

    log.debug(f"Loaded config from {path}")
    return SemtagConfig.from_dict(data)
