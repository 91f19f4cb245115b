from src.adapter.repositories.principal_repository import SqlPrincipalRepository
from src.app.repositories.admin_repository import IAdminRepository
from src.domain.entities import Admin


class AdminRepository(SqlPrincipalRepository, IAdminRepository):
    """Admin repository implementation using SQLModel"""

    model = Admin
