"""Application factories for repository access."""

from okozukai.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
