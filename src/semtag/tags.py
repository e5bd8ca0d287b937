"""Snapshot of the version tags found in a repository."""

import logging
from typing import Dict, Iterable, Iterator, Optional

from .errors import ParseError
from .semver import DEFAULT_PREFIX, Version, parse

log = logging.getLogger(__name__)


class TagSet:
    """Versions parsed from a list of tag names.

    Tags that are not versions are skipped. When several tag names parse to
    the same version, the first one wins.
    """

    def __init__(self, tags: Optional[Dict[Version, str]] = None):
        self._tags: Dict[Version, str] = dict(tags or {})
        self._last = max(self._tags, default=None)
        self._final_max = max(
            (version for version in self._tags if version.is_final), default=None
        )

    @classmethod
    def from_names(
        cls, names: Iterable[str], prefix: Optional[str] = DEFAULT_PREFIX
    ) -> "TagSet":
        tags: Dict[Version, str] = {}
        for name in names:
            try:
                version = parse(name, prefix)
            except ParseError as e:
                log.debug(f"Ignoring tag {name}: {e.reason}")
                continue

            if version in tags:
                log.debug(
                    f"Ignoring tag {name}: version already tagged as {tags[version]}"
                )
                continue
            tags[version] = name

        return cls(tags)

    @property
    def last(self) -> Optional[Version]:
        """Highest version of all tags, pre-releases included."""
        return self._last

    @property
    def final_max(self) -> Optional[Version]:
        """Highest final version."""
        return self._final_max

    def tag_name(self, version: Optional[Version]) -> Optional[str]:
        if version is None:
            return None
        return self._tags.get(version)

    def __contains__(self, version: object) -> bool:
        return version in self._tags

    def __iter__(self) -> Iterator[Version]:
        return iter(sorted(self._tags))

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"TagSet(last={self._last}, final_max={self._final_max}, size={len(self)})"
