"""Semantic version tagging for git repositories."""

from .errors import (
    DirtyTreeError,
    ParseError,
    RepositoryError,
    SemtagError,
    TagPushError,
    VersionTooLowError,
)
from .resolver import NoOpSignal, RepoState, resolve
from .semver import Channel, Scope, Version, compare, parse
from .tags import TagSet

__all__ = [
    "Channel",
    "DirtyTreeError",
    "NoOpSignal",
    "ParseError",
    "RepoState",
    "RepositoryError",
    "Scope",
    "SemtagError",
    "TagPushError",
    "TagSet",
    "Version",
    "VersionTooLowError",
    "compare",
    "parse",
    "resolve",
]
