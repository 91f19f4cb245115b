from abc import ABC

from src.app.repositories.principal_repository import IPrincipalRepository


class IUserRepository(IPrincipalRepository, ABC):
    """User repository interface - application layer"""
