"""
Job Portal Auth Domain Entities

Each principal table in its own file.
"""

from typing import Union

from .principal import PrincipalBase
from .user import User
from .admin import Admin

Principal = Union[User, Admin]

__all__ = [
    "PrincipalBase",
    "Principal",
    "User",
    "Admin",
]
