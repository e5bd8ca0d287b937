"""Next-version resolution.

`resolve` is a pure function of a `TagSet`, a `RepoState` snapshot and the
requested channel and scope. The decision table, with `bumped` being the
final version reached by bumping the highest final tag:

    bumped ahead of the last tag's version line   -> new line (channel.1)
    final requested                               -> last tag made final
    same channel as the last tag                  -> counter + 1
    higher-ranked channel than the last tag       -> same line, channel.1
    lower-ranked channel than the last tag        -> last line bumped, channel.1

Unless forced, a HEAD without new commits yields a `NoOpSignal` and a dirty
working tree raises `DirtyTreeError`.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .errors import DirtyTreeError, VersionTooLowError
from .repository.base import TagRepository
from .semver import ZERO, Channel, Scope, Version
from .tags import TagSet

log = logging.getLogger(__name__)

# Percentage of changed lines above which `auto` selects a minor bump.
DEFAULT_AUTO_THRESHOLD = 10.0


@dataclass(frozen=True)
class RepoState:
    """Repository state captured once at the start of an operation.

    Attributes:
        commits_since_last: Commits on HEAD not reachable from the last tag.
        commits_since_final: Commits on HEAD not reachable from the final tag.
        is_dirty: Whether the working tree has uncommitted changes.
        branch: Checked out branch, None on a detached HEAD.
        commit_hash: Short hash of HEAD.
        default_branch: Name of the repository's primary branch.
        changed_line_percentage: Lines changed since the last tag, in percent.
            Only captured when needed for the `auto` scope.
    """

    commits_since_last: int
    commits_since_final: int
    is_dirty: bool = False
    branch: Optional[str] = None
    commit_hash: str = ""
    default_branch: str = "master"
    changed_line_percentage: Optional[float] = None

    @classmethod
    def capture(
        cls,
        repository: TagRepository,
        tags: TagSet,
        with_changes: bool = False,
        default_branch: Optional[str] = None,
    ) -> "RepoState":
        last_tag = tags.tag_name(tags.last)
        final_tag = tags.tag_name(tags.final_max)

        commits_since_last = repository.commits_since(last_tag)
        if final_tag == last_tag:
            commits_since_final = commits_since_last
        else:
            commits_since_final = repository.commits_since(final_tag)

        state = cls(
            commits_since_last=commits_since_last,
            commits_since_final=commits_since_final,
            is_dirty=repository.is_dirty(),
            branch=repository.current_branch(),
            commit_hash=repository.current_commit_short_hash(),
            default_branch=default_branch or repository.default_branch_name(),
            changed_line_percentage=(
                repository.changed_line_percentage(last_tag) if with_changes else None
            ),
        )
        log.debug(f"Captured repository state: {state}")
        return state


@dataclass(frozen=True)
class NoOpSignal:
    """Nothing to tag: HEAD is already at `version`."""

    version: Optional[Version]
    reason: str = "No new commits since the last tag"


def resolve_scope(
    scope: Scope,
    changed_line_percentage: Optional[float] = None,
    threshold: float = DEFAULT_AUTO_THRESHOLD,
) -> Scope:
    """Turn `auto` into `minor` or `patch` based on the size of the changes."""
    scope = Scope(scope)
    if scope is not Scope.AUTO:
        return scope

    if changed_line_percentage is None:
        raise ValueError("The auto scope needs the changed line percentage")

    resolved = Scope.MINOR if changed_line_percentage > threshold else Scope.PATCH
    log.info(
        f"Auto scope: {changed_line_percentage:.2f}% of lines changed "
        f"(threshold {threshold}%), using {resolved}"
    )
    return resolved


def check_guards(
    tags: TagSet, state: RepoState, force: bool
) -> Optional[NoOpSignal]:
    """Apply the no-new-commits and dirty-tree guards.

    Returns:
        NoOpSignal if HEAD has no commits since the last tag, None otherwise.

    Raises:
        DirtyTreeError: If the working tree is dirty.
    """
    if force:
        return None
    if state.commits_since_last == 0:
        return NoOpSignal(version=tags.last)
    if state.is_dirty:
        raise DirtyTreeError()
    return None


def next_version(tags: TagSet, channel: Channel, scope: Scope) -> Version:
    """Compute the candidate version, without any repository guards.

    `scope` must already be resolved (not `auto`).
    """
    channel = Channel(channel)
    reference = tags.final_max or ZERO
    bumped = reference.bump(scope)
    last = tags.last

    if last is None or bumped > last.core:
        log.debug(f"{bumped} starts a new version line after {last}")
        return bumped.with_channel(channel)

    if channel is Channel.FINAL:
        return last.core

    if channel is last.channel:
        return last.with_channel(channel, last.prerelease + 1)

    if channel.rank > last.channel.rank:
        return last.with_channel(channel)

    # A lower-ranked pre-release would sort before the existing one on this
    # line, so it moves to the next line.
    forward = last.core.bump(scope)
    log.debug(f"{channel} ranks below {last.channel} of {last}, moving to {forward}")
    return forward.with_channel(channel)


def resolve(
    tags: TagSet,
    channel: Channel,
    scope: Scope,
    explicit_version: Optional[Version],
    state: RepoState,
    force: bool = False,
    auto_threshold: float = DEFAULT_AUTO_THRESHOLD,
) -> Union[Version, NoOpSignal]:
    """Resolve the version to tag next.

    Raises:
        VersionTooLowError: If explicit_version is not above the last tag.
        DirtyTreeError: If the working tree is dirty and force is not set.
    """
    if explicit_version is not None:
        if tags.last is not None and not explicit_version > tags.last:
            raise VersionTooLowError(str(explicit_version), str(tags.last))
        candidate = explicit_version
    else:
        resolved_scope = resolve_scope(
            scope, state.changed_line_percentage, auto_threshold
        )
        candidate = next_version(tags, channel, resolved_scope)

    no_op = check_guards(tags, state, force)
    if no_op is not None:
        log.info(f"{no_op.reason}, keeping {no_op.version}")
        return no_op

    log.debug(f"Resolved next version {candidate}")
    return candidate
