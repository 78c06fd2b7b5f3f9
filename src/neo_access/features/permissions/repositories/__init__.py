"""Role repository implementations."""

from .in_memory_role_repository import InMemoryRoleRepository

__all__ = [
    "InMemoryRoleRepository",
]
