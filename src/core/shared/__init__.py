"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Exceções de domínio
- Guardas de validação
- Interfaces (Ports)
- Token de cancelamento cooperativo
"""

from .exceptions import (
    DomainException,
    EntityValidationError,
    EntityNotFoundError,
)
from .validation import DomainValidation
from .cancellation import CancellationToken
from .interfaces import UnitOfWork, Repository, InMemoryUnitOfWork

__all__ = [
    "DomainException",
    "EntityValidationError",
    "EntityNotFoundError",
    "DomainValidation",
    "CancellationToken",
    "UnitOfWork",
    "Repository",
    "InMemoryUnitOfWork",
]
