"""Application factories."""

from finplan.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
