from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .repository.base import TagRef


class SemtagError(Exception):
    """Base class for every fatal semtag error."""


class ParseError(SemtagError, ValueError):
    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid version '{text}': {reason}")


class VersionTooLowError(SemtagError):
    def __init__(self, requested: str, last: str):
        self.requested = requested
        self.last = last
        super().__init__(
            f"Version {requested} is not greater than the last version {last}"
        )


class DirtyTreeError(SemtagError):
    def __init__(self):
        super().__init__(
            "Working tree has uncommitted changes. Commit or stash them, "
            "or use -f/--force."
        )


class RepositoryError(SemtagError):
    pass


class TagPushError(RepositoryError):
    """Pushing failed after the tag was created locally.

    The local tag is left in place; `tag` describes it.
    """

    def __init__(self, tag: "TagRef", message: str):
        self.tag = tag
        super().__init__(
            f"Tag {tag.name} was created locally but pushing it failed: {message}"
        )
