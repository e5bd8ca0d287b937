"""Semantic version values.

A version is ``MAJOR.MINOR.PATCH`` with an optional pre-release channel
(``alpha``, ``beta`` or ``rc``) and counter, and optional build metadata:

    v1.2.0
    v1.3.0-beta.2
    1.3.0-dev.4+feature.abc1234   (build metadata, see semtag.current)

Versions are totally ordered on (major, minor, patch, channel rank, counter).
Build metadata never takes part in ordering or equality.
"""

import functools
import re
from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import Optional

from .errors import ParseError

DEFAULT_PREFIX = "v"

_VERSION_RE = re.compile(
    r"^(?P<major>0|[1-9][0-9]*)\.(?P<minor>0|[1-9][0-9]*)\.(?P<patch>0|[1-9][0-9]*)"
    r"(?:-(?P<channel>[0-9A-Za-z-]+)(?:\.(?P<counter>[0-9A-Za-z-]+))?)?"
    r"(?:\+(?P<build>[0-9A-Za-z.-]+))?$"
)
_COUNTER_RE = re.compile(r"^[1-9][0-9]*$")


class Channel(StrEnum):
    ALPHA = "alpha"
    BETA = "beta"
    RC = "rc"
    FINAL = "final"

    @property
    def rank(self) -> int:
        return _CHANNEL_RANKS[self]

    @property
    def is_prerelease(self) -> bool:
        return self is not Channel.FINAL


_CHANNEL_RANKS = {
    Channel.ALPHA: 0,
    Channel.BETA: 1,
    Channel.RC: 2,
    Channel.FINAL: 3,
}


class Scope(StrEnum):
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    AUTO = "auto"


@functools.total_ordering
@dataclass(frozen=True)
class Version:
    major: int
    minor: int
    patch: int
    channel: Channel = Channel.FINAL
    prerelease: Optional[int] = None
    build: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        if not isinstance(self.channel, Channel):
            object.__setattr__(self, "channel", Channel(self.channel))
        for name in ("major", "minor", "patch"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        if self.channel is Channel.FINAL and self.prerelease is not None:
            raise ValueError("A final version cannot have a pre-release counter")
        if self.channel is not Channel.FINAL and (
            self.prerelease is None or self.prerelease < 1
        ):
            raise ValueError(
                f"A {self.channel} version needs a positive pre-release counter"
            )

    def _key(self) -> tuple:
        return (
            self.major,
            self.minor,
            self.patch,
            self.channel.rank,
            self.prerelease or 0,
        )

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() < other._key()

    @property
    def is_final(self) -> bool:
        return self.channel is Channel.FINAL

    @property
    def core(self) -> "Version":
        """The same version line as a final version, without metadata."""
        return Version(self.major, self.minor, self.patch)

    def with_channel(self, channel: Channel, counter: int = 1) -> "Version":
        if channel is Channel.FINAL:
            return self.core
        return replace(self, channel=channel, prerelease=counter, build=None)

    def bump(self, component: Scope) -> "Version":
        """Return the next final version for `component`.

        Lower-order components are reset to zero; any pre-release and build
        metadata are dropped.
        """
        if component is Scope.MAJOR:
            return Version(self.major + 1, 0, 0)
        if component is Scope.MINOR:
            return Version(self.major, self.minor + 1, 0)
        if component is Scope.PATCH:
            return Version(self.major, self.minor, self.patch + 1)
        raise ValueError(f"Cannot bump version component '{component}'")

    def format(self, prefixed: bool = True, prefix: str = DEFAULT_PREFIX) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if not self.is_final:
            text += f"-{self.channel}.{self.prerelease}"
        if self.build:
            text += f"+{self.build}"
        if prefixed and prefix:
            text = prefix + text
        return text

    def __str__(self) -> str:
        return self.format(prefixed=False)


ZERO = Version(0, 0, 0)


def parse(text: str, prefix: Optional[str] = DEFAULT_PREFIX) -> Version:
    """Parse a version string such as ``v1.2.3-rc.1``.

    The prefix is optional in the text. With an empty or None `prefix`
    (plain mode) the text must start directly with the major number.

    Raises:
        ParseError: If the text does not follow the version grammar.
    """
    body = text.strip()
    if prefix and body.startswith(prefix):
        body = body[len(prefix) :]

    match = _VERSION_RE.match(body)
    if match is None:
        raise ParseError(text, "expected MAJOR.MINOR.PATCH[-CHANNEL.N][+METADATA]")

    channel_token = match.group("channel")
    counter_token = match.group("counter")
    channel = Channel.FINAL
    counter = None

    if channel_token is not None:
        if channel_token not in (Channel.ALPHA, Channel.BETA, Channel.RC):
            raise ParseError(text, f"unknown channel '{channel_token}'")
        channel = Channel(channel_token)
        if counter_token is None:
            raise ParseError(text, f"missing counter for channel '{channel}'")
        if _COUNTER_RE.match(counter_token) is None:
            raise ParseError(
                text, f"counter must be a positive integer, got '{counter_token}'"
            )
        counter = int(counter_token)

    return Version(
        major=int(match.group("major")),
        minor=int(match.group("minor")),
        patch=int(match.group("patch")),
        channel=channel,
        prerelease=counter,
        build=match.group("build"),
    )


def try_parse(text: str, prefix: Optional[str] = DEFAULT_PREFIX) -> Optional[Version]:
    try:
        return parse(text, prefix)
    except ParseError:
        return None


def compare(a: Version, b: Version) -> int:
    """Return -1, 0 or 1 as `a` is lower than, equal to or greater than `b`."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0
