"""Abstract interface to the repository that holds the version tags.

The resolution engine only talks to this interface. `GitRepository` is the
real implementation; tests use an in-memory fake.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class TagRef:
    """An annotated tag created by semtag.

    Attributes:
        name: Tag name (e.g., "v1.2.0").
        commit: Hexsha of the tagged commit.
        pushed: Whether the tag was pushed to the remote.
    """

    name: str
    commit: str
    pushed: bool = False


class TagRepository(ABC):
    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def list_tags(self) -> List[str]:
        """Return the names of all tags in the repository."""
        pass

    @abstractmethod
    def commits_since(self, tag: Optional[str]) -> int:
        """Count commits on HEAD that are not reachable from `tag`.

        Args:
            tag: Tag name, or None to count the whole history of HEAD.
        """
        pass

    @abstractmethod
    def commit_subjects_since(self, tag: Optional[str]) -> List[str]:
        """Return subjects of the commits counted by commits_since(), newest first."""
        pass

    @abstractmethod
    def is_dirty(self) -> bool:
        pass

    @abstractmethod
    def current_branch(self) -> Optional[str]:
        """Return the checked out branch name, or None on a detached HEAD."""
        pass

    @abstractmethod
    def current_commit_short_hash(self) -> str:
        pass

    @abstractmethod
    def default_branch_name(self) -> str:
        pass

    @abstractmethod
    def changed_line_percentage(self, since_tag: Optional[str]) -> float:
        """Return changed lines since `since_tag` as a percentage of all lines."""
        pass

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def create_annotated_tag(self, name: str, message: str) -> TagRef:
        """Create an annotated tag at HEAD.

        Raises:
            RepositoryError: If the tag exists or git fails.
        """
        pass

    @abstractmethod
    def push_tag(self, name: str) -> None:
        """Push tag `name` to the configured remote.

        Raises:
            RepositoryError: If the push is rejected or fails.
        """
        pass
