"""
Configurações globais do Pytest para o Codeflix Catalog.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures compartilhadas.
"""

import pytest
from faker import Faker


FAKER_SEED = 20240101


@pytest.fixture
def fake():
    """
    Faker com semente fixa por teste.

    Cada teste recebe sua própria instância: sem estado global
    compartilhado e dados reproduzíveis.
    """
    instance = Faker()
    instance.seed_instance(FAKER_SEED)
    return instance
