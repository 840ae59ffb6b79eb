"""
Testes Unitários para os DTOs do domínio de Categorias.
"""

import dataclasses
from datetime import datetime

import pytest

from src.core.categories.dtos import CreateCategoryInput, CreateCategoryOutput
from src.core.categories.entities import Category


class TestCreateCategoryInput:

    def test_is_active_default(self):
        input_dto = CreateCategoryInput(name="Movies", description="Film catalog")

        assert input_dto.is_active is True

    def test_imutavel(self):
        input_dto = CreateCategoryInput(name="Movies", description="Film catalog")

        with pytest.raises(dataclasses.FrozenInstanceError):
            input_dto.name = "Series"

    def test_to_dict(self):
        input_dto = CreateCategoryInput("Movies", "Film catalog", False)

        assert input_dto.to_dict() == {
            "name": "Movies",
            "description": "Film catalog",
            "is_active": False,
        }


class TestCreateCategoryOutput:

    def test_from_entity(self, valid_category):
        output = CreateCategoryOutput.from_entity(valid_category)

        assert output.id == valid_category.id
        assert output.name == valid_category.name
        assert output.description == valid_category.description
        assert output.is_active == valid_category.is_active
        assert output.created_at == valid_category.created_at

    def test_to_dict_serializa_id_e_data(self):
        category = Category("Movies", "Film catalog", is_active=False)

        data = CreateCategoryOutput.from_entity(category).to_dict()

        assert data["id"] == str(category.id)
        assert data["is_active"] is False
        assert datetime.fromisoformat(data["created_at"]) == category.created_at
