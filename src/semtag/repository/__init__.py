from .base import TagRef, TagRepository
from .git_repo import GitRepository

__all__ = ["TagRef", "TagRepository", "GitRepository"]
