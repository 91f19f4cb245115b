from abc import ABC

from src.app.repositories.principal_repository import IPrincipalRepository


class IAdminRepository(IPrincipalRepository, ABC):
    """Admin repository interface - application layer"""
