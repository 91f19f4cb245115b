"""
Principal Scopes

A scope specializes the generic authentication and password-reset use cases
to one principal type: which repository to use, which credential claims to
issue, where the reset link points and how a new account is built.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from src.app.repositories.principal_repository import IPrincipalRepository
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Admin, Principal, User


class PrincipalScope(ABC):
    kind: str
    is_admin: bool
    reset_path: str

    @abstractmethod
    def repository(self, uow: UnitOfWork) -> IPrincipalRepository:
        """Repository holding this principal type"""
        pass

    @abstractmethod
    def new_principal(
        self,
        full_name: str,
        email: str,
        username: str,
        password_hash: str,
        is_super_admin: bool = False,
    ) -> Principal:
        """Build an unsaved principal entity"""
        pass

    def claims(self, principal: Principal) -> Dict[str, Any]:
        """Credential claims for a principal - never includes secrets"""
        return {
            "sub": str(principal.id),
            "id": str(principal.id),
            "email": principal.email,
            "admin": self.is_admin,
            "is_super_admin": bool(getattr(principal, "is_super_admin", False)),
        }


class UserScope(PrincipalScope):
    kind = "user"
    is_admin = False
    reset_path = "/reset-password"

    def repository(self, uow: UnitOfWork) -> IPrincipalRepository:
        return uow.users

    def new_principal(
        self,
        full_name: str,
        email: str,
        username: str,
        password_hash: str,
        is_super_admin: bool = False,
    ) -> User:
        # Users can never be elevated
        return User(
            full_name=full_name,
            email=email,
            username=username,
            password_hash=password_hash,
        )


class AdminScope(PrincipalScope):
    kind = "admin"
    is_admin = True
    reset_path = "/admin/reset-password"

    def repository(self, uow: UnitOfWork) -> IPrincipalRepository:
        return uow.admins

    def new_principal(
        self,
        full_name: str,
        email: str,
        username: str,
        password_hash: str,
        is_super_admin: bool = False,
    ) -> Admin:
        return Admin(
            full_name=full_name,
            email=email,
            username=username,
            password_hash=password_hash,
            is_super_admin=is_super_admin,
        )
