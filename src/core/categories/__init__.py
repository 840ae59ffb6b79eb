"""
Domínio de Categorias - Classificação do conteúdo do catálogo.

Este módulo contém a lógica de negócio relacionada a categorias:
- Entidades (Category)
- Use Cases (CreateCategory)
- DTOs (Input/Output Data Transfer Objects)
- Ports (Interfaces para repositórios)
"""

from .entities import Category
from .dtos import CreateCategoryInput, CreateCategoryOutput
from .ports import CategoryRepository, InMemoryCategoryRepository
from .use_cases import CreateCategory

__all__ = [
    # Entities
    "Category",
    # DTOs
    "CreateCategoryInput",
    "CreateCategoryOutput",
    # Ports
    "CategoryRepository",
    "InMemoryCategoryRepository",
    # Use Cases
    "CreateCategory",
]
