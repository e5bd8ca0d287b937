import logging
from typing import List, Optional

import git
from git import Repo

from ..errors import RepositoryError
from .base import TagRef, TagRepository

log = logging.getLogger(__name__)

# Hash of git's empty tree, used to count all lines of a tree with numstat.
EMPTY_TREE_SHA = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"

FALLBACK_DEFAULT_BRANCH = "master"


def tag_ref(tag: str) -> str:
    return f"refs/tags/{tag}"


def sum_numstat_lines(numstat: str) -> int:
    """Sum added and deleted lines of `git diff --numstat` output.

    Binary files show '-' instead of line counts and are skipped.
    """
    total = 0
    for line in numstat.split("\n"):
        parts = line.strip().split("\t")
        if len(parts) < 3:
            continue
        if parts[0] != "-":
            total += int(parts[0])
        if parts[1] != "-":
            total += int(parts[1])
    return total


class GitRepository(TagRepository):
    """TagRepository backed by a local git repository through GitPython."""

    def __init__(self, repo: Repo, remote: str = "origin"):
        self.repo = repo
        self.remote = remote

    @classmethod
    def open(cls, path: str = ".", remote: str = "origin") -> "GitRepository":
        try:
            repo = Repo(path, search_parent_directories=True)
        except (git.InvalidGitRepositoryError, git.NoSuchPathError):
            raise RepositoryError(f"Not a git repository: {path}")
        return cls(repo, remote=remote)

    def has_commits(self) -> bool:
        return self.repo.head.is_valid()

    def _range(self, tag: Optional[str]) -> str:
        return f"{tag_ref(tag)}..HEAD" if tag else "HEAD"

    def list_tags(self) -> List[str]:
        return [tag.name for tag in self.repo.tags]

    def commits_since(self, tag: Optional[str]) -> int:
        if not self.has_commits():
            return 0
        try:
            return int(self.repo.git.rev_list("--count", self._range(tag)))
        except git.GitCommandError as e:
            raise RepositoryError(f"Failed to count commits since {tag}: {e}")

    def commit_subjects_since(self, tag: Optional[str]) -> List[str]:
        if not self.has_commits():
            return []
        try:
            return [commit.summary for commit in self.repo.iter_commits(self._range(tag))]
        except git.GitCommandError as e:
            raise RepositoryError(f"Failed to list commits since {tag}: {e}")

    def is_dirty(self) -> bool:
        return self.repo.is_dirty()

    def current_branch(self) -> Optional[str]:
        try:
            return self.repo.active_branch.name
        except TypeError:
            # Detached HEAD state
            return None

    def current_commit_short_hash(self) -> str:
        if not self.has_commits():
            return ""
        return self.repo.git.rev_parse("--short", "HEAD")

    def default_branch_name(self) -> str:
        try:
            ref = self.repo.git.symbolic_ref(
                "--quiet", f"refs/remotes/{self.remote}/HEAD"
            )
            return ref.strip().removeprefix(f"refs/remotes/{self.remote}/")
        except git.GitCommandError:
            pass

        local_heads = {head.name for head in self.repo.heads}
        for candidate in ("main", "master"):
            if candidate in local_heads:
                return candidate

        try:
            configured = self.repo.git.config("--get", "init.defaultBranch").strip()
            if configured:
                return configured
        except git.GitCommandError:
            pass

        return FALLBACK_DEFAULT_BRANCH

    def changed_line_percentage(self, since_tag: Optional[str]) -> float:
        if not self.has_commits():
            return 0.0

        try:
            total = sum_numstat_lines(
                self.repo.git.diff("--numstat", EMPTY_TREE_SHA, "HEAD")
            )
            if total == 0:
                return 0.0
            if since_tag is None:
                return 100.0

            changed = sum_numstat_lines(
                self.repo.git.diff("--numstat", tag_ref(since_tag), "HEAD")
            )
        except git.GitCommandError as e:
            raise RepositoryError(f"Failed to diff against {since_tag}: {e}")

        percentage = changed * 100.0 / total
        log.debug(
            f"{changed} of {total} lines changed since {since_tag} ({percentage:.2f}%)"
        )
        return percentage

    def create_annotated_tag(self, name: str, message: str) -> TagRef:
        if not self.has_commits():
            raise RepositoryError("Cannot tag a repository without commits")
        if name in self.list_tags():
            raise RepositoryError(f"Tag {name} already exists")

        try:
            tag = self.repo.create_tag(name, message=message)
        except git.GitCommandError as e:
            raise RepositoryError(f"Failed to create tag {name}: {e}")

        log.info(f"Created tag {name} at {tag.commit.hexsha[:11]}")
        return TagRef(name=name, commit=tag.commit.hexsha)

    def push_tag(self, name: str) -> None:
        try:
            self.repo.git.push(self.remote, tag_ref(name))
        except git.GitCommandError as e:
            raise RepositoryError(f"Failed to push tag {name} to {self.remote}: {e}")

        log.info(f"Pushed tag {name} to {self.remote}")
