"""
Exceções de Domínio do Codeflix Catalog.

Este módulo define exceções específicas do domínio que permitem
comunicar erros de forma clara e tipada entre as camadas.

Hierarquia:
    DomainException (base)
    ├── EntityValidationError (invariante de entidade violada)
    └── EntityNotFoundError (entidade não existe)
"""

from typing import Optional


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Todas as exceções específicas do domínio devem herdar desta classe.
    Isso permite capturar qualquer erro de domínio de forma genérica.

    Example:
        try:
            category.update(name="ab")
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class EntityValidationError(DomainException):
    """
    Invariante de entidade violada.

    Lançada pelo construtor e pelos métodos de mutação de uma
    entidade quando os dados não atendem às regras do domínio.
    A mensagem é exposta ao usuário e deve ser mantida literal.

    Example:
        if len(name) < 3:
            raise EntityValidationError(
                "Name should be at least 3 characters long",
                field="Name",
            )
    """

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message, "ENTITY_VALIDATION_ERROR")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class EntityNotFoundError(DomainException):
    """
    Entidade não encontrada no repositório.

    Lançada quando uma busca por ID não retorna resultado.
    """

    def __init__(
        self,
        message: str,
        entity_type: Optional[str] = None,
        entity_id: Optional[str] = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id:
            result["entity_id"] = self.entity_id
        return result
