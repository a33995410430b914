"""Discovery of installed package repositories."""
from overlaykit.discovery.repositories import RepositoryLister, parse_repository_list

__all__ = ['RepositoryLister', 'parse_repository_list']
