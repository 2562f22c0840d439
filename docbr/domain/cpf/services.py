# docbr/domain/cpf/services.py
#
# CPF engine: generation, validation and formatting.
#
# Design decisions:
#   - is_valid never raises. Wrong length, repeated digits, the blacklisted
#     sequence and wrong check digits all collapse to False.
#   - "12345678909" satisfies the checksum but is the canonical example CPF,
#     so it is rejected explicitly.
#   - format() does not validate: it assumes 11 clean characters.
#
# Invariants:
#   - generate() output always has 11 digits (14 chars when formatted).
#   - is_valid(format(x)) == is_valid(x) for every generated x.
from __future__ import annotations

import random
from collections.abc import Sequence

from docbr.domain.shared.digito_verificador import (
    apenas_digitos,
    modulo11,
    soma_pesos_decrescentes,
    sequencia_repetida,
)

CPF_LENGTH = 11
BASE_LENGTH = 9
CPF_BLACKLIST = frozenset({"12345678909"})


def calcular_digito(sequencia: Sequence[int]) -> int:
    """Digito verificador do CPF para a sequencia dada (base de 9 ou base + 1o DV)."""
    return modulo11(soma_pesos_decrescentes(sequencia))


def calcular_digitos(base: Sequence[int]) -> tuple[int, int]:
    primeiro = calcular_digito(base)
    segundo = calcular_digito([*base, primeiro])
    return primeiro, segundo


def gerar_base(rng: random.Random | None = None) -> list[int]:
    fonte = rng or random
    return [fonte.randrange(10) for _ in range(BASE_LENGTH)]


def generate(formatted: bool = False, *, rng: random.Random | None = None) -> str:
    """Gera um CPF valido.

    Args:
        formatted: se True, retorna no formato XXX.XXX.XXX-XX.
        rng: fonte aleatoria opcional (random.Random). Sem ela usa o modulo random.

    Returns:
        CPF com 11 digitos, ou formatado.
    """
    base = gerar_base(rng)
    cpf = "".join(str(d) for d in (*base, *calcular_digitos(base)))
    return format(cpf) if formatted else cpf


def formato_valido(limpo: str) -> bool:
    """Comprimento 11, sem digitos todos iguais e fora da lista negra."""
    if len(limpo) != CPF_LENGTH:
        return False
    return not sequencia_repetida(limpo) and limpo not in CPF_BLACKLIST


def is_valid(raw: str) -> bool:
    """Valida um CPF com ou sem pontuacao."""
    limpo = apenas_digitos(raw)
    if not formato_valido(limpo):
        return False

    digitos = [int(c) for c in limpo]
    primeiro, segundo = calcular_digitos(digitos[:BASE_LENGTH])
    return primeiro == digitos[9] and segundo == digitos[10]


def format(cpf: str) -> str:  # noqa: A001
    """XXX.XXX.XXX-XX"""
    return f"{cpf[:3]}.{cpf[3:6]}.{cpf[6:9]}-{cpf[9:]}"
