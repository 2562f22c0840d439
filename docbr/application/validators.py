# docbr/application/validators.py
#
# Pydantic adapter exposing the CPF / CNPJ checks as field types.
#
# Design decisions:
#   - Two rules, one per document. A failed check maps to a named error type
#     (document.cpf / document.cnpj) with a fixed message, so callers can
#     branch on ValidationError.errors()[i]["type"].
#   - None passes untouched; required vs optional is left to pydantic
#     (declare the field as CPFStr | None to accept null).
#   - Empty strings fail with string.empty before the document check.
#   - Valid values are returned as received: formatting is not normalised.
from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, ValidationInfo
from pydantic_core import PydanticCustomError

from docbr import cnpj, cpf

MENSAGENS: dict[str, str] = {
    "string.empty": "{label} não pode ser vazio",
    "document.cpf": "CPF inválido",
    "document.cnpj": "CNPJ inválido",
}


def _label(info: ValidationInfo) -> str:
    return info.field_name or "value"


def _rejeitar_vazio(value: str, info: ValidationInfo) -> None:
    if value == "":
        raise PydanticCustomError(
            "string.empty",
            MENSAGENS["string.empty"],
            {"label": _label(info), "value": value},
        )


def validar_cpf(value: str | None, info: ValidationInfo) -> str | None:
    if value is None:
        return None
    _rejeitar_vazio(value, info)
    if not cpf.is_valid(value):
        raise PydanticCustomError(
            "document.cpf",
            MENSAGENS["document.cpf"],
            {"label": _label(info), "value": value},
        )
    return value


def validar_cnpj(value: str | None, info: ValidationInfo) -> str | None:
    if value is None:
        return None
    _rejeitar_vazio(value, info)
    if not cnpj.is_valid(value):
        raise PydanticCustomError(
            "document.cnpj",
            MENSAGENS["document.cnpj"],
            {"label": _label(info), "value": value},
        )
    return value


CPFStr = Annotated[str, AfterValidator(validar_cpf)]
CNPJStr = Annotated[str, AfterValidator(validar_cnpj)]
