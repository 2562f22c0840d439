# docbr/pipeline/transform/documentos.py
#
# Batch generation, validation and formatting of CPF / CNPJ columns.
#
# Design decisions:
#   - map_elements calls the domain functions row by row.
#   - Null cells are skipped by map_elements and stay null in the output.
#   - apply_format_to_df cleans each value before formatting and only formats
#     values that pass is_valid, so the output column never holds a
#     malformed mask.
#
# Invariants:
#   - apply_* never mutate the input DataFrame.
#   - gerar_lote(n, ...) returns exactly n rows in a Utf8 column "documento".
from __future__ import annotations

import random
from collections.abc import Callable
from types import ModuleType
from typing import Literal

import polars as pl

from docbr import cnpj, cpf
from docbr.domain.cnpj.tipos import TipoCNPJ
from docbr.domain.shared.digito_verificador import apenas_alfanumericos, apenas_digitos

Documento = Literal["cpf", "cnpj"]

_MODULOS: dict[str, ModuleType] = {"cpf": cpf, "cnpj": cnpj}
_LIMPEZA: dict[str, Callable[[str], str]] = {
    "cpf": apenas_digitos,
    "cnpj": apenas_alfanumericos,
}


def _modulo(documento: str) -> ModuleType:
    if documento not in _MODULOS:
        raise ValueError(f"Documento desconhecido: {documento!r}. Use 'cpf' ou 'cnpj'.")
    return _MODULOS[documento]


def gerar_lote(
    n: int,
    documento: Documento,
    *,
    tipo: TipoCNPJ | str = TipoCNPJ.NUMERICO,
    formatted: bool = False,
    rng: random.Random | None = None,
) -> pl.DataFrame:
    """Generate n valid documents in a single-column DataFrame.

    Args:
        n:         Number of rows. Must be >= 0.
        documento: "cpf" or "cnpj".
        tipo:      CNPJ variant; ignored for CPF.
        formatted: Apply the display mask to every value.
        rng:       Optional random source for reproducible batches.

    Returns:
        DataFrame with one Utf8 column named ``documento``.

    Raises:
        ValueError: if n is negative or documento is unknown.
    """
    _modulo(documento)
    if n < 0:
        raise ValueError(f"n deve ser >= 0, recebido {n}")

    if documento == "cpf":
        valores = [cpf.generate(formatted, rng=rng) for _ in range(n)]
    else:
        tipo = TipoCNPJ(tipo)
        valores = [cnpj.generate(tipo=tipo, formatted=formatted, rng=rng) for _ in range(n)]

    return pl.DataFrame({"documento": valores}, schema={"documento": pl.Utf8})


def apply_validation_to_df(df: pl.DataFrame, col: str, documento: Documento) -> pl.DataFrame:
    """Add a Boolean column ``<col>_valido`` with is_valid applied to *col*.

    Args:
        df:        Input DataFrame containing *col*.
        col:       Name of the column holding raw document strings.
        documento: "cpf" or "cnpj".

    Returns:
        New DataFrame with the extra column. Null inputs produce null.
    """
    is_valid = _modulo(documento).is_valid
    valido = (
        df[col]
        .map_elements(is_valid, return_dtype=pl.Boolean)
        .alias(f"{col}_valido")
    )
    return df.with_columns(valido)


def apply_format_to_df(df: pl.DataFrame, col: str, documento: Documento) -> pl.DataFrame:
    """Add a Utf8 column ``<col>_formatado`` with the mask of each valid document.

    Invalid and null inputs produce null.
    """
    modulo = _modulo(documento)
    limpar = _LIMPEZA[documento]

    def _formatar(valor: str) -> str | None:
        limpo = limpar(valor)
        return modulo.format(limpo) if modulo.is_valid(limpo) else None

    formatado = (
        df[col]
        .map_elements(_formatar, return_dtype=pl.Utf8)
        .alias(f"{col}_formatado")
    )
    return df.with_columns(formatado)


def resumir_validacao(df: pl.DataFrame, col: str) -> dict[str, int]:
    """Count total / validos / invalidos / nulos from ``<col>_valido``."""
    coluna = df[f"{col}_valido"]
    total = len(coluna)
    nulos = coluna.null_count()
    validos = int(coluna.sum() or 0)
    return {
        "total": total,
        "validos": validos,
        "invalidos": total - validos - nulos,
        "nulos": nulos,
    }
