"""
Admin Entity

Back-office account. Stored apart from users so the two principal
types never share credentials or reset tokens.
"""

from sqlmodel import Field

from .principal import PrincipalBase


class Admin(PrincipalBase, table=True):
    """
    Admin entity - back-office account.

    Business Rules:
    - Issued credentials always carry admin=true
    - is_super_admin is propagated into credential claims
    """

    __tablename__ = "admins"

    is_super_admin: bool = Field(default=False)
