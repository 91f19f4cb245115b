from src.adapter.repositories.principal_repository import SqlPrincipalRepository
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User


class UserRepository(SqlPrincipalRepository, IUserRepository):
    """User repository implementation using SQLModel"""

    model = User
