# docbr/domain/cnpj/alfanumerico.py
#
# Alphanumeric CNPJ engine (base of 12 letters/digits + 2 numeric DVs).
#
# Design decisions:
#   - Each letter contributes ord(letra) - 48 to the weighted sum, read from
#     the literal VALORES_LETRAS table.
#   - Characters outside the table (lowercase letters included) contribute 0.
#   - validar_alfanumerico compares the DVs as integers parsed from the
#     leading digits of each side ("05" -> 5, "5A" -> 5, "AB" -> no number).
#     A side without leading digits never matches.
#   - The letter stays in the document; only its numeric value enters the sum.
#
# Invariants:
#   - gerar_alfanumerico() output always has 14 characters, the last two digits.
#   - validar_alfanumerico never raises.
from __future__ import annotations

import random
import re
import string
from collections.abc import Sequence

from docbr.domain.shared.digito_verificador import modulo11, soma_pesos_ciclicos

CNPJ_LENGTH = 14
BASE_LENGTH = 12
ALFABETO = string.ascii_uppercase

VALORES_LETRAS: dict[str, int] = {
    "A": 17,
    "B": 18,
    "C": 19,
    "D": 20,
    "E": 21,
    "F": 22,
    "G": 23,
    "H": 24,
    "I": 25,
    "J": 26,
    "K": 27,
    "L": 28,
    "M": 29,
    "N": 30,
    "O": 31,
    "P": 32,
    "Q": 33,
    "R": 34,
    "S": 35,
    "T": 36,
    "U": 37,
    "V": 38,
    "W": 39,
    "X": 40,
    "Y": 41,
    "Z": 42,
}

_PREFIXO_NUMERICO = re.compile(r"[0-9]+")


def valor_posicional(simbolo: str | int) -> int:
    """Valor de um simbolo na soma ponderada: digito -> ele mesmo, letra -> tabela."""
    if isinstance(simbolo, int):
        return simbolo
    if simbolo in string.digits:
        return int(simbolo)
    return VALORES_LETRAS.get(simbolo, 0)


def converter(cnpj: str) -> list[int]:
    """'12ABC3' -> [1, 2, 17, 18, 19, 3]"""
    return [valor_posicional(c) for c in cnpj]


def calcular_digito(sequencia: Sequence[str | int]) -> int:
    return modulo11(soma_pesos_ciclicos([valor_posicional(s) for s in sequencia]))


def calcular_digitos(base: Sequence[str | int]) -> tuple[int, int]:
    primeiro = calcular_digito(base)
    segundo = calcular_digito([*base, primeiro])
    return primeiro, segundo


def gerar_base_alfanumerica(rng: random.Random | None = None) -> list[str | int]:
    """12 posicoes, cada uma digito ou letra com probabilidade 1/2."""
    fonte = rng or random
    base: list[str | int] = []
    for _ in range(BASE_LENGTH):
        if fonte.random() < 0.5:
            base.append(fonte.randrange(10))
        else:
            base.append(fonte.choice(ALFABETO))
    return base


def gerar_alfanumerico(*, rng: random.Random | None = None) -> str:
    """Gera um CNPJ alfanumerico valido, sem formatacao (ex: 'OGZP0N77444Y42')."""
    base = gerar_base_alfanumerica(rng)
    return "".join(str(s) for s in (*base, *calcular_digitos(base)))


def _parse_int(texto: str) -> int | None:
    match = _PREFIXO_NUMERICO.match(texto)
    return int(match.group()) if match else None


def validar_alfanumerico(cnpj: str) -> bool:
    """Valida um CNPJ alfanumerico ja limpo.

    Com 14 caracteres usa os 12 primeiros como base; com qualquer outro
    comprimento usa a string inteira (permite validar uma base crua de 12).
    Os DVs calculados sao comparados como inteiro com os dois ultimos
    caracteres da entrada.
    """
    base = cnpj[:BASE_LENGTH] if len(cnpj) == CNPJ_LENGTH else cnpj
    primeiro, segundo = calcular_digitos(converter(base))

    informado = _parse_int(cnpj[-2:])
    if informado is None:
        return False
    return informado == int(f"{primeiro}{segundo}")
