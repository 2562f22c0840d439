# docbr/domain/cnpj/numerico.py
#
# Classic (all-digit) CNPJ engine.
#
# Design decisions:
#   - Weights cycle 2..9 from the rightmost element, see
#     digito_verificador.soma_pesos_ciclicos.
#   - validar_numerico cleans its own input so it can be called directly,
#     not only through the dispatcher.
#
# Invariants:
#   - gerar_numerico() output always has 14 digits.
#   - validar_numerico never raises.
from __future__ import annotations

import random
from collections.abc import Sequence

from docbr.domain.shared.digito_verificador import (
    apenas_digitos,
    modulo11,
    sequencia_repetida,
    soma_pesos_ciclicos,
)

CNPJ_LENGTH = 14
BASE_LENGTH = 12


def calcular_digito(sequencia: Sequence[int]) -> int:
    return modulo11(soma_pesos_ciclicos(sequencia))


def calcular_digitos(base: Sequence[int]) -> tuple[int, int]:
    """Os dois DVs: o segundo e calculado sobre base + primeiro DV."""
    primeiro = calcular_digito(base)
    segundo = calcular_digito([*base, primeiro])
    return primeiro, segundo


def gerar_base_numerica(rng: random.Random | None = None) -> list[int]:
    fonte = rng or random
    return [fonte.randrange(10) for _ in range(BASE_LENGTH)]


def gerar_numerico(*, rng: random.Random | None = None) -> str:
    """Gera um CNPJ numerico valido, sem formatacao."""
    base = gerar_base_numerica(rng)
    return "".join(str(d) for d in (*base, *calcular_digitos(base)))


def formato_valido(limpo: str) -> bool:
    return len(limpo) == CNPJ_LENGTH and not sequencia_repetida(limpo)


def validar_numerico(raw: str) -> bool:
    """Valida um CNPJ classico verificando formato e digitos verificadores.

    Args:
        raw: CNPJ com ou sem pontuacao. Qualquer caractere nao numerico e descartado.

    Returns:
        True se o CNPJ tiver 14 digitos, nao for uma sequencia repetida e os
        dois DVs conferirem.
    """
    limpo = apenas_digitos(raw)
    if not formato_valido(limpo):
        return False

    digitos = [int(c) for c in limpo]
    primeiro, segundo = calcular_digitos(digitos[:BASE_LENGTH])
    return primeiro == digitos[12] and segundo == digitos[13]
