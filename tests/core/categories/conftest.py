"""Fixtures do domínio de Categorias."""

import pytest

from src.core.categories.ports import InMemoryCategoryRepository
from src.core.shared.interfaces import InMemoryUnitOfWork

from tests.core.categories.factories import make_valid_category, make_input


@pytest.fixture
def valid_category(fake):
    """Categoria válida gerada com dados aleatórios reproduzíveis."""
    return make_valid_category(fake)


@pytest.fixture
def valid_input(fake):
    """Input válido para CreateCategory."""
    return make_input(fake)


@pytest.fixture
def category_repo():
    """Fixture para repositório em memória."""
    return InMemoryCategoryRepository()


@pytest.fixture
def uow():
    """Fixture para Unit of Work em memória."""
    return InMemoryUnitOfWork()
