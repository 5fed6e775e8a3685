"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Interfaces (Ports)
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    DuplicateEntityError,
    BusinessRuleViolationError,
)
from .interfaces import UnitOfWork, Repository, PasswordHasher

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "BusinessRuleViolationError",
    "UnitOfWork",
    "Repository",
    "PasswordHasher",
]
