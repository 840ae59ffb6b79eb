"""
Use Cases (Application Services) do Domínio de Categorias.

Use Cases implementados:
- CreateCategory: Cria nova categoria

Responsabilidades dos Use Cases:
- Coordenar entidades (validação fica na entidade)
- Persistir via repositório
- Finalizar transação via UoW
- Retornar DTOs de saída

Princípios:
- Um Use Case = Uma operação de negócio
- Dependências injetadas (DI)
- Sem lógica de infraestrutura
- Erros dos colaboradores propagam sem tradução nem retry
"""

from typing import Optional
import logging

from src.core.shared.cancellation import CancellationToken
from src.core.shared.exceptions import EntityValidationError
from src.core.shared.interfaces import UnitOfWork

from .ports import CategoryRepository
from .entities import Category
from .dtos import CreateCategoryInput, CreateCategoryOutput

logger = logging.getLogger(__name__)


class CreateCategory:
    """
    Use Case: Criar uma nova categoria.

    Fluxo:
    1. Criar entidade Category (valida os dados)
    2. Registrar no repositório
    3. Commit via Unit of Work
    4. Retornar DTO de saída

    Attributes:
        repository: Repositório de categorias
        unit_of_work: Unit of Work para finalizar a transação

    Example:
        use_case = CreateCategory(repository, unit_of_work)
        output = await use_case.handle(
            CreateCategoryInput(name="Movies", description="Film catalog")
        )
        print(output.id)
    """

    def __init__(self, repository: CategoryRepository, unit_of_work: UnitOfWork):
        """
        Inicializa use case com dependências injetadas.

        Args:
            repository: Repositório para persistência
            unit_of_work: Unit of Work para commit
        """
        self.repository = repository
        self.unit_of_work = unit_of_work

    async def handle(
        self,
        input_dto: CreateCategoryInput,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> CreateCategoryOutput:
        """
        Executa criação de categoria.

        Args:
            input_dto: Dados de entrada
            cancellation_token: Repassado ao repositório e ao UoW

        Returns:
            DTO com dados da categoria criada

        Raises:
            EntityValidationError: Se dados inválidos (nada é persistido)
            asyncio.CancelledError: Se um colaborador abortar por cancelamento
        """
        try:
            category = Category(
                input_dto.name,
                input_dto.description,
                input_dto.is_active,
            )
        except EntityValidationError as e:
            logger.info(f"Category rejected: {e}")
            raise

        logger.debug(f"Inserting category {category.id}")
        await self.repository.insert(category, cancellation_token)
        await self.unit_of_work.commit(cancellation_token)

        logger.info(f"Category created: {category.id} ({category.name})")

        return CreateCategoryOutput.from_entity(category)
