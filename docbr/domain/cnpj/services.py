# docbr/domain/cnpj/services.py
#
# CNPJ dispatcher: generate / is_valid / format for both variants.
#
# Design decisions:
#   - is_valid strips everything except letters and digits (CPF strips
#     everything except digits). Then the cleaned string is classified once:
#     all digits -> numeric validator, any letter -> alphanumeric validator.
#   - The blacklist of repeated characters applies to the numeric path.
#     A repeated-letter string fails the alphanumeric DV comparison anyway.
#   - format() is content-agnostic: same punctuation for both variants.
#
# Invariants:
#   - is_valid never raises.
#   - generate() default is the numeric variant.
from __future__ import annotations

import random

from docbr.domain.cnpj.alfanumerico import gerar_alfanumerico, validar_alfanumerico
from docbr.domain.cnpj.numerico import CNPJ_LENGTH, gerar_numerico, validar_numerico
from docbr.domain.cnpj.tipos import TipoCNPJ
from docbr.domain.shared.digito_verificador import apenas_alfanumericos

_GERADORES = {
    TipoCNPJ.NUMERICO: gerar_numerico,
    TipoCNPJ.ALFANUMERICO: gerar_alfanumerico,
}

_VALIDADORES = {
    TipoCNPJ.NUMERICO: validar_numerico,
    TipoCNPJ.ALFANUMERICO: validar_alfanumerico,
}


def classificar(limpo: str) -> TipoCNPJ | None:
    """NUMERICO se so digitos, ALFANUMERICO se houver letra ASCII, senao None."""
    if not limpo.isascii() or not limpo.isalnum():
        return None
    if limpo.isdigit():
        return TipoCNPJ.NUMERICO
    return TipoCNPJ.ALFANUMERICO


def generate(
    *,
    tipo: TipoCNPJ | str = TipoCNPJ.NUMERICO,
    formatted: bool = False,
    rng: random.Random | None = None,
) -> str:
    """Gera um CNPJ valido.

    Args:
        tipo: TipoCNPJ.NUMERICO ("numeric", padrao) ou TipoCNPJ.ALFANUMERICO
            ("alfanumeric").
        formatted: se True, retorna no formato XX.XXX.XXX/XXXX-XX.
        rng: fonte aleatoria opcional.

    Returns:
        CNPJ com 14 caracteres, ou formatado.

    Raises:
        ValueError: se tipo nao for um TipoCNPJ conhecido.
    """
    cnpj = _GERADORES[TipoCNPJ(tipo)](rng=rng)
    return format(cnpj) if formatted else cnpj


def is_valid(raw: str) -> bool:
    """Valida um CNPJ numerico ou alfanumerico, com ou sem pontuacao."""
    limpo = apenas_alfanumericos(raw)
    if len(limpo) != CNPJ_LENGTH:
        return False

    tipo = classificar(limpo)
    if tipo is None:
        return False
    return _VALIDADORES[tipo](limpo)


def format(cnpj: str) -> str:  # noqa: A001
    """XX.XXX.XXX/XXXX-XX"""
    return f"{cnpj[:2]}.{cnpj[2:5]}.{cnpj[5:8]}/{cnpj[8:12]}-{cnpj[12:]}"
