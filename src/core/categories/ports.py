"""
Ports (Interfaces) do Domínio de Categorias.

Define os contratos que os Adapters de infraestrutura devem implementar
para persistência de categorias.

Princípio:
    Core define interfaces → Adapters implementam
    Dependências sempre apontam para o Core
"""

from typing import Dict, List, Optional, Protocol, runtime_checkable
import uuid

from src.core.shared.cancellation import CancellationToken
from src.core.shared.exceptions import EntityNotFoundError
from src.core.shared.interfaces import Repository

from .entities import Category


@runtime_checkable
class CategoryRepository(Repository[Category], Protocol):
    """
    Interface para persistência de Categorias.

    Implementações:
    - InMemoryCategoryRepository (para testes)
    - Adapters de banco fornecidos pela aplicação hospedeira

    Example:
        class SqlCategoryRepository:
            async def insert(self, category, cancellation_token=None):
                self._session.add(CategoryModel.from_entity(category))
    """

    async def insert(
        self,
        category: Category,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> None:
        """
        Registra categoria para persistência no próximo commit.

        Args:
            category: Entidade a ser persistida
            cancellation_token: Sinal de cancelamento cooperativo

        Raises:
            asyncio.CancelledError: Se o token foi cancelado
        """
        ...

    async def get(
        self,
        category_id: uuid.UUID,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> Category:
        """
        Busca categoria por ID.

        Raises:
            EntityNotFoundError: Se categoria não existe
        """
        ...


class InMemoryCategoryRepository:
    """
    Implementação em memória do CategoryRepository.

    Útil para:
    - Testes unitários
    - Prototipagem
    - Desenvolvimento local

    Não usar em produção!

    Example:
        repo = InMemoryCategoryRepository()
        await repo.insert(category)
        found = await repo.get(category.id)
    """

    def __init__(self):
        self._categories: Dict[uuid.UUID, Category] = {}

    async def insert(
        self,
        category: Category,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> None:
        """Salva categoria em memória."""
        if cancellation_token:
            cancellation_token.raise_if_cancellation_requested()
        self._categories[category.id] = category

    async def get(
        self,
        category_id: uuid.UUID,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> Category:
        """Busca categoria por ID."""
        if cancellation_token:
            cancellation_token.raise_if_cancellation_requested()
        category = self._categories.get(category_id)
        if category is None:
            raise EntityNotFoundError(
                f"Category '{category_id}' not found",
                entity_type="Category",
                entity_id=str(category_id),
            )
        return category

    def list_all(self) -> List[Category]:
        """Lista todas as categorias."""
        return list(self._categories.values())

    def count(self) -> int:
        return len(self._categories)

    def clear(self) -> None:
        """Limpa todos os dados (útil para testes)."""
        self._categories.clear()
