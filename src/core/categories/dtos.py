"""
Data Transfer Objects (DTOs) do Domínio de Categorias.

DTOs são estruturas simples para transportar dados entre camadas,
evitando vazamento de entidades para camadas externas.
"""

from dataclasses import dataclass
from datetime import datetime
import uuid

from .entities import Category


# =============================================================================
# INPUT DTOs (Entrada)
# =============================================================================

@dataclass(frozen=True)
class CreateCategoryInput:
    """
    DTO de entrada para criar categoria.

    Imutável (frozen=True). Não valida nada: as regras de negócio
    ficam na entidade Category.

    Attributes:
        name: Nome da categoria
        description: Descrição da categoria
        is_active: Estado inicial
    """

    name: str
    description: str
    is_active: bool = True

    def to_dict(self) -> dict:
        """Converte para dicionário."""
        return {
            "name": self.name,
            "description": self.description,
            "is_active": self.is_active,
        }


# =============================================================================
# OUTPUT DTOs (Saída)
# =============================================================================

@dataclass
class CreateCategoryOutput:
    """
    DTO de saída com os dados da categoria criada.

    Attributes:
        id: Identificador único
        name: Nome
        description: Descrição
        is_active: Estado
        created_at: Data/hora (UTC) de criação
    """

    id: uuid.UUID
    name: str
    description: str
    is_active: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, entity: Category) -> "CreateCategoryOutput":
        """
        Factory method para converter entidade em DTO.

        Args:
            entity: Entidade Category

        Returns:
            DTO com dados da entidade
        """
        return cls(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            is_active=entity.is_active,
            created_at=entity.created_at,
        )

    def to_dict(self) -> dict:
        """Converte para dicionário (serialização JSON)."""
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat(),
        }
