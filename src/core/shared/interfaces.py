"""
Interfaces (Ports) - Contratos entre Core e Adapters.

Este módulo define as interfaces que os Adapters devem implementar.
São os "Ports" da Arquitetura Hexagonal.

Tipos de Ports:
- Driven Ports (lado direito): Repository, UnitOfWork
- Driving Ports (lado esquerdo): Definidos nos Use Cases

Princípio: Core define interfaces; Adapters implementam.
O fluxo de dependência sempre aponta para o Core.

Todas as operações de persistência são assíncronas e recebem um
CancellationToken opcional, repassado pelo use case.
"""

from abc import ABC, abstractmethod
from typing import Optional, Protocol, TypeVar

from .cancellation import CancellationToken


# Type variable para entidades genéricas
T = TypeVar("T", contravariant=True)


class UnitOfWork(ABC):
    """
    Unit of Work - Finaliza atomicamente um lote de operações.

    Repositórios apenas preparam as mudanças; nada é considerado
    persistido até que commit() seja concluído.

    Responsabilidades:
    - Commit coordenado das operações pendentes
    - Rollback quando o chamador desiste do lote

    Example:
        class SqlUnitOfWork(UnitOfWork):
            async def commit(self, cancellation_token=None):
                await self._session.commit()
    """

    @abstractmethod
    async def commit(
        self, cancellation_token: Optional[CancellationToken] = None
    ) -> None:
        """
        Persiste todas as mudanças pendentes.

        Args:
            cancellation_token: Sinal de cancelamento cooperativo

        Raises:
            asyncio.CancelledError: Se o token foi cancelado
        """
        raise NotImplementedError

    @abstractmethod
    async def rollback(
        self, cancellation_token: Optional[CancellationToken] = None
    ) -> None:
        """
        Descarta todas as mudanças pendentes.

        Args:
            cancellation_token: Sinal de cancelamento cooperativo
        """
        raise NotImplementedError


class Repository(Protocol[T]):
    """
    Interface genérica para repositórios.

    Type Parameters:
        T: Tipo da entidade gerenciada pelo repositório

    Note:
        Usando Protocol para permitir duck typing.
        Adapters não precisam herdar explicitamente.
    """

    async def insert(
        self,
        entity: T,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> None:
        """
        Registra nova entidade para persistência no próximo commit.

        Args:
            entity: Entidade a ser persistida
            cancellation_token: Sinal de cancelamento cooperativo
        """
        ...


class InMemoryUnitOfWork(UnitOfWork):
    """
    Implementação em memória do UnitOfWork.

    Útil para testes unitários e prototipagem; apenas registra
    quantas vezes commit/rollback foram chamados.

    Não usar em produção!
    """

    def __init__(self):
        self.commit_count = 0
        self.rollback_count = 0

    async def commit(
        self, cancellation_token: Optional[CancellationToken] = None
    ) -> None:
        if cancellation_token:
            cancellation_token.raise_if_cancellation_requested()
        self.commit_count += 1

    async def rollback(
        self, cancellation_token: Optional[CancellationToken] = None
    ) -> None:
        if cancellation_token:
            cancellation_token.raise_if_cancellation_requested()
        self.rollback_count += 1

    @property
    def committed(self) -> bool:
        return self.commit_count > 0
