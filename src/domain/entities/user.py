"""
User Entity

Job seeker / recruiter account of the portal.
"""

from .principal import PrincipalBase


class User(PrincipalBase, table=True):
    """User entity - ordinary portal account."""

    __tablename__ = "users"
