import re

from .resolver import RepoState
from .semver import DEFAULT_PREFIX, ZERO
from .tags import TagSet

DEV_LABEL = "dev"

_METADATA_UNSAFE_RE = re.compile(r"[^0-9A-Za-z-]")


def sanitize_metadata(text: str) -> str:
    """Replace characters not allowed in build metadata identifiers by '-'."""
    return _METADATA_UNSAFE_RE.sub("-", text)


def format_current(
    tags: TagSet,
    state: RepoState,
    prefixed: bool = True,
    prefix: str = DEFAULT_PREFIX,
) -> str:
    """Describe the working tree version.

    A clean tree sitting on the last tag is that tag's version. Anything else
    is a development version of the last final release, e.g.
    ``v1.2.0-dev.3+feature-x.abc1234`` (the branch is omitted on the default
    branch).
    """
    if tags.last is not None and not state.is_dirty and state.commits_since_last == 0:
        return tags.last.format(prefixed, prefix)

    base = tags.final_max or ZERO
    text = f"{base.major}.{base.minor}.{base.patch}-{DEV_LABEL}.{state.commits_since_final}"

    metadata = []
    if state.branch and state.branch != state.default_branch:
        metadata.append(sanitize_metadata(state.branch))
    if state.commit_hash:
        metadata.append(state.commit_hash)
    if metadata:
        text += "+" + ".".join(metadata)

    if prefixed and prefix:
        text = prefix + text
    return text
