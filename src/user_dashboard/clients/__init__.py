from .base import BaseClient
from .users_client import UsersClient

__all__ = ["BaseClient", "UsersClient"]
