"""
Entidades do Domínio de Categorias.

Entidades:
- Category: Agregado raiz que classifica o conteúdo do catálogo

Regras de Negócio Encapsuladas:
- Validação de nome e descrição na criação e na atualização
- Identidade (UUID) e data de criação atribuídas uma única vez
- Ativação/desativação sem validação
"""

from datetime import datetime, timezone
from typing import Optional
import uuid

from src.core.shared.validation import DomainValidation


class Category:
    """
    Entidade de Domínio: Category.

    Invariantes:
    - Nome não pode ser nulo, vazio ou só espaços
    - Nome deve ter entre 3 e 255 caracteres
    - Descrição não pode ser nula (vazia é permitida)
    - Descrição deve ter no máximo 10000 caracteres

    As regras são verificadas nessa ordem; a primeira violada
    interrompe a operação com EntityValidationError.

    Attributes:
        id: Identificador único (UUID), imutável
        name: Nome da categoria
        description: Descrição da categoria
        is_active: Se a categoria está ativa
        created_at: Data/hora (UTC) de criação, imutável

    Example:
        category = Category("Movies", "Film catalog")
        category.deactivate()
        category.update("Films")
    """

    NAME_MIN_LENGTH: int = 3
    NAME_MAX_LENGTH: int = 255
    DESCRIPTION_MAX_LENGTH: int = 10_000

    def __init__(self, name: str, description: str, is_active: bool = True):
        """
        Cria categoria validada.

        Args:
            name: Nome (3 a 255 caracteres)
            description: Descrição (até 10000 caracteres, pode ser vazia)
            is_active: Estado inicial (default: True)

        Raises:
            EntityValidationError: Se alguma invariante for violada
        """
        self._id = uuid.uuid4()
        self.name = name
        self.description = description
        self.is_active = is_active
        self._created_at = datetime.now(timezone.utc)

        self.validate()

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def activate(self) -> None:
        """Ativa a categoria. Idempotente."""
        self.is_active = True

    def deactivate(self) -> None:
        """Desativa a categoria. Idempotente."""
        self.is_active = False

    def update(self, name: str, description: Optional[str] = None) -> None:
        """
        Atualiza nome e, opcionalmente, descrição.

        Os novos valores são validados antes de qualquer alteração:
        se a validação falhar a entidade permanece intacta.

        Args:
            name: Novo nome
            description: Nova descrição; None mantém a atual

        Raises:
            EntityValidationError: Se algum valor for inválido
        """
        new_description = self.description if description is None else description

        self._validate(name, new_description)

        self.name = name
        self.description = new_description

    def validate(self) -> None:
        """Verifica as invariantes contra o estado atual."""
        self._validate(self.name, self.description)

    @classmethod
    def _validate(cls, name: Optional[str], description: Optional[str]) -> None:
        DomainValidation.not_null_or_empty(name, "Name")
        DomainValidation.min_length(name, cls.NAME_MIN_LENGTH, "Name")
        DomainValidation.max_length(name, cls.NAME_MAX_LENGTH, "Name")

        DomainValidation.not_null(description, "Description")
        DomainValidation.max_length(
            description, cls.DESCRIPTION_MAX_LENGTH, "Description"
        )

    def __repr__(self) -> str:
        """Representação string para debugging."""
        return (
            f"Category("
            f"id={str(self.id)[:8]}..., "
            f"name='{self.name[:20]}', "
            f"is_active={self.is_active}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, Category):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash baseado em ID."""
        return hash(self.id)
