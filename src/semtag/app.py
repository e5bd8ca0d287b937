import logging
from dataclasses import dataclass
from typing import Optional, Union

from .config import SemtagConfig
from .current import format_current
from .repository.base import TagRef, TagRepository
from .resolver import NoOpSignal, RepoState, resolve
from .semver import ZERO, Channel, Scope, Version, parse
from .tagging import Tagger
from .tags import TagSet

log = logging.getLogger(__name__)


@dataclass
class ReleaseResult:
    """Outcome of a release command.

    Attributes:
        version: The resolved version, or the unchanged last version for a no-op.
        no_op: True when there was nothing to tag.
        tag: The created tag, None when nothing was tagged.
    """

    version: Optional[Version]
    no_op: bool = False
    tag: Optional[TagRef] = None


class AppContext:
    """Wires the repository adapter and the configuration to the version engine."""

    def __init__(
        self,
        repository: Optional[TagRepository] = None,
        config: Optional[SemtagConfig] = None,
    ):
        self.repository: Optional[TagRepository] = repository
        self.config: Optional[SemtagConfig] = config

    def get_repository(self) -> TagRepository:
        if self.repository is None:
            raise RuntimeError("Repository not set")
        return self.repository

    def get_config(self) -> SemtagConfig:
        if self.config is None:
            self.config = SemtagConfig()
        return self.config

    @property
    def prefix(self) -> str:
        return self.get_config().version.prefix

    def is_prefixed(self, plain: bool) -> bool:
        return not (plain or self.get_config().version.plain)

    def format_version(self, version: Optional[Version], plain: bool = False) -> str:
        return (version or ZERO).format(self.is_prefixed(plain), self.prefix)

    def load_tags(self) -> TagSet:
        tags = TagSet.from_names(self.get_repository().list_tags(), self.prefix)
        log.debug(f"Loaded {tags}")
        return tags

    def capture_state(self, tags: TagSet, with_changes: bool = False) -> RepoState:
        return RepoState.capture(
            self.get_repository(),
            tags,
            with_changes=with_changes,
            default_branch=self.get_config().tag.default_branch,
        )

    def get_final(self) -> Optional[Version]:
        return self.load_tags().final_max

    def get_last(self) -> Optional[Version]:
        return self.load_tags().last

    def get_current(self, plain: bool = False) -> str:
        tags = self.load_tags()
        state = self.capture_state(tags)
        return format_current(tags, state, self.is_prefixed(plain), self.prefix)

    def parse_version(self, text: str) -> Version:
        """Parse a version given on the command line.

        Raises:
            ParseError: If the text is not a valid version.
        """
        return parse(text, self.prefix)

    def next_version(
        self,
        channel: Channel,
        scope: Optional[Scope] = None,
        explicit_version: Optional[Version] = None,
        force: bool = False,
        tags: Optional[TagSet] = None,
    ) -> Union[Version, NoOpSignal]:
        config = self.get_config()
        scope = Scope(scope or config.scope.default)

        if tags is None:
            tags = self.load_tags()
        needs_changes = explicit_version is None and scope is Scope.AUTO
        state = self.capture_state(tags, with_changes=needs_changes)

        return resolve(
            tags,
            channel,
            scope,
            explicit_version,
            state,
            force=force,
            auto_threshold=config.scope.auto_threshold,
        )

    def release(
        self,
        channel: Channel,
        scope: Optional[Scope] = None,
        explicit_version: Optional[Version] = None,
        output_only: bool = False,
        force: bool = False,
        plain: bool = False,
        push: Optional[bool] = None,
    ) -> ReleaseResult:
        """Resolve the next version and tag it unless output_only is set.

        With output_only the guards are skipped and the computed candidate is
        printed even when HEAD is already tagged or the tree is dirty.

        Raises:
            SemtagError: On resolution guards or repository failures.
        """
        tags = self.load_tags()
        result = self.next_version(
            channel, scope, explicit_version, force or output_only, tags
        )
        if isinstance(result, NoOpSignal):
            return ReleaseResult(version=result.version, no_op=True)

        if output_only:
            return ReleaseResult(version=result)

        repository = self.get_repository()
        subjects = repository.commit_subjects_since(tags.tag_name(tags.last))

        if push is None:
            push = self.get_config().tag.push

        tagger = Tagger(repository, prefix=self.prefix)
        ref = tagger.tag(result, subjects, push=push, prefixed=self.is_prefixed(plain))
        return ReleaseResult(version=result, tag=ref)
