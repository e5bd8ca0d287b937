"""In-memory TagRepository used by the tests."""

from typing import Dict, List, Optional

from semtag.errors import RepositoryError
from semtag.repository.base import TagRef, TagRepository


class FakeRepository(TagRepository):
    """TagRepository keeping tags and repository state in memory.

    Commit counts default to `commits` for every tag; `counts` overrides the
    count for specific tags (None is the whole history).
    """

    def __init__(
        self,
        tags: Optional[List[str]] = None,
        commits: int = 1,
        counts: Optional[Dict[Optional[str], int]] = None,
        dirty: bool = False,
        branch: Optional[str] = "main",
        commit_hash: str = "abc1234",
        default_branch: str = "main",
        percentage: float = 0.0,
        subjects: Optional[List[str]] = None,
        push_error: Optional[str] = None,
    ):
        self.tags = list(tags or [])
        self.commits = commits
        self.counts = dict(counts or {})
        self.dirty = dirty
        self.branch = branch
        self.commit_hash = commit_hash
        self.default_branch = default_branch
        self.percentage = percentage
        self.subjects = list(subjects or [])
        self.push_error = push_error

        self.created: List[TagRef] = []
        self.messages: Dict[str, str] = {}
        self.pushed: List[str] = []
        self.percentage_requests: List[Optional[str]] = []

    def list_tags(self) -> List[str]:
        return list(self.tags)

    def commits_since(self, tag: Optional[str]) -> int:
        return self.counts.get(tag, self.commits)

    def commit_subjects_since(self, tag: Optional[str]) -> List[str]:
        return list(self.subjects)

    def is_dirty(self) -> bool:
        return self.dirty

    def current_branch(self) -> Optional[str]:
        return self.branch

    def current_commit_short_hash(self) -> str:
        return self.commit_hash

    def default_branch_name(self) -> str:
        return self.default_branch

    def changed_line_percentage(self, since_tag: Optional[str]) -> float:
        self.percentage_requests.append(since_tag)
        return self.percentage

    def create_annotated_tag(self, name: str, message: str) -> TagRef:
        if name in self.tags:
            raise RepositoryError(f"Tag {name} already exists")
        self.tags.append(name)
        self.messages[name] = message
        ref = TagRef(name=name, commit="f" * 40)
        self.created.append(ref)
        return ref

    def push_tag(self, name: str) -> None:
        if self.push_error:
            raise RepositoryError(self.push_error)
        self.pushed.append(name)
