"""
Guardas de validação reutilizáveis pelas entidades.

Cada guarda lança EntityValidationError com uma mensagem montada
a partir do nome do campo, para que todas as entidades do catálogo
reportem violações no mesmo formato.

Example:
    DomainValidation.not_null_or_empty(name, "Name")
    DomainValidation.min_length(name, 3, "Name")
"""

from typing import Optional

from .exceptions import EntityValidationError


class DomainValidation:
    """Conjunto de guardas estáticas de validação de domínio."""

    @staticmethod
    def not_null(value: object, field_name: str) -> None:
        """Rejeita None."""
        if value is None:
            raise EntityValidationError(
                f"{field_name} should not be null",
                field=field_name,
            )

    @staticmethod
    def not_null_or_empty(value: Optional[str], field_name: str) -> None:
        """Rejeita None, string vazia ou só com espaços."""
        if value is None or not value.strip():
            raise EntityValidationError(
                f"{field_name} should not be null or empty",
                field=field_name,
            )

    @staticmethod
    def min_length(value: str, min_length: int, field_name: str) -> None:
        if len(value) < min_length:
            raise EntityValidationError(
                f"{field_name} should be at least {min_length} characters long",
                field=field_name,
            )

    @staticmethod
    def max_length(value: str, max_length: int, field_name: str) -> None:
        if len(value) > max_length:
            raise EntityValidationError(
                f"{field_name} should be less or equal {max_length} characters long",
                field=field_name,
            )
