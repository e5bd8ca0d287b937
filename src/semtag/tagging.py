import logging
from typing import Sequence

from .errors import RepositoryError, TagPushError
from .repository.base import TagRef, TagRepository
from .semver import DEFAULT_PREFIX, Version
from .utils.templates import render_template

log = logging.getLogger(__name__)

TAG_MESSAGE_TEMPLATE = "tag_message"


def build_tag_message(tag_name: str, annotation_commits: Sequence[str]) -> str:
    return render_template(
        TAG_MESSAGE_TEMPLATE, tag_name=tag_name, commits=list(annotation_commits)
    )


class Tagger:
    """Creates the annotated tag for a resolved version.

    Tag creation and push are not transactional: when the push fails the
    local tag stays and `TagPushError` reports it.
    """

    def __init__(
        self,
        repository: TagRepository,
        prefix: str = DEFAULT_PREFIX,
    ):
        self.repository = repository
        self.prefix = prefix

    def tag_name(self, version: Version, prefixed: bool = True) -> str:
        return version.format(prefixed, self.prefix)

    def tag(
        self,
        version: Version,
        annotation_commits: Sequence[str],
        push: bool,
        prefixed: bool = True,
    ) -> TagRef:
        """Create the tag for `version` at HEAD and optionally push it.

        Args:
            version: The resolved version.
            annotation_commits: Commit subjects since the previous tag.
            push: Push the tag to the remote after creating it.
            prefixed: Whether the tag name carries the version prefix.

        Returns:
            TagRef of the created tag.

        Raises:
            RepositoryError: If the tag cannot be created.
            TagPushError: If the tag was created but could not be pushed.
        """
        name = self.tag_name(version, prefixed)
        message = build_tag_message(name, annotation_commits)

        log.debug(f"Creating tag {name} with {len(annotation_commits)} commit(s)")
        ref = self.repository.create_annotated_tag(name, message)

        if not push:
            return ref

        try:
            self.repository.push_tag(name)
        except RepositoryError as e:
            log.warning(f"Tag {name} exists locally but was not pushed")
            raise TagPushError(ref, str(e)) from e

        ref.pushed = True
        return ref
