"""
Testes Unitários para as guardas de DomainValidation.
"""

import pytest

from src.core.shared.exceptions import EntityValidationError, DomainException
from src.core.shared.validation import DomainValidation


class TestNotNull:

    @pytest.mark.parametrize("value", ["", "valor", 0, False, []])
    def test_aceita_valores_nao_nulos(self, value):
        DomainValidation.not_null(value, "Field")

    def test_rejeita_none(self):
        with pytest.raises(EntityValidationError) as exc_info:
            DomainValidation.not_null(None, "Description")

        assert exc_info.value.message == "Description should not be null"
        assert exc_info.value.field == "Description"


class TestNotNullOrEmpty:

    @pytest.mark.parametrize("value", [None, "", " ", "\t", "\n  "])
    def test_rejeita_nulo_vazio_ou_espacos(self, value):
        with pytest.raises(EntityValidationError) as exc_info:
            DomainValidation.not_null_or_empty(value, "Name")

        assert exc_info.value.message == "Name should not be null or empty"

    def test_aceita_texto(self):
        DomainValidation.not_null_or_empty(" a ", "Name")


class TestLength:

    @pytest.mark.parametrize("value", ["abc", "abcd"])
    def test_min_length_aceita(self, value):
        DomainValidation.min_length(value, 3, "Name")

    def test_min_length_rejeita(self):
        with pytest.raises(EntityValidationError) as exc_info:
            DomainValidation.min_length("ab", 3, "Name")

        assert exc_info.value.message == "Name should be at least 3 characters long"

    @pytest.mark.parametrize("value", ["", "a" * 10])
    def test_max_length_aceita(self, value):
        DomainValidation.max_length(value, 10, "Description")

    def test_max_length_rejeita(self):
        with pytest.raises(EntityValidationError) as exc_info:
            DomainValidation.max_length("a" * 11, 10, "Description")

        assert exc_info.value.message == (
            "Description should be less or equal 10 characters long"
        )

    def test_erro_e_domain_exception(self):
        """Permite capturar de forma genérica."""
        with pytest.raises(DomainException):
            DomainValidation.min_length("", 1, "Name")
