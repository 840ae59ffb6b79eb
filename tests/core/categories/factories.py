"""
Factories de dados do domínio de Categorias.

Funções puras que recebem o gerador (Faker) como parâmetro;
a semente é controlada por quem chama (fixture `fake`).
"""

from faker import Faker

from src.core.categories.entities import Category
from src.core.categories.dtos import CreateCategoryInput


def make_valid_name(fake: Faker) -> str:
    """Nome entre 3 e 255 caracteres."""
    name = ""
    while len(name) < Category.NAME_MIN_LENGTH:
        name = fake.catch_phrase()
    return name[:Category.NAME_MAX_LENGTH]


def make_valid_description(fake: Faker) -> str:
    """Descrição com até 10000 caracteres."""
    return fake.paragraph(nb_sentences=5)[:Category.DESCRIPTION_MAX_LENGTH]


def make_too_long_name(fake: Faker) -> str:
    name = ""
    while len(name) <= Category.NAME_MAX_LENGTH:
        name += fake.catch_phrase()
    return name


def make_too_long_description(fake: Faker) -> str:
    description = ""
    while len(description) <= Category.DESCRIPTION_MAX_LENGTH:
        description += fake.paragraph(nb_sentences=10)
    return description


def make_valid_category(fake: Faker) -> Category:
    return Category(make_valid_name(fake), make_valid_description(fake))


def make_input(fake: Faker, **overrides) -> CreateCategoryInput:
    data = {
        "name": make_valid_name(fake),
        "description": make_valid_description(fake),
        "is_active": fake.pybool(),
    }
    data.update(overrides)
    return CreateCategoryInput(**data)
