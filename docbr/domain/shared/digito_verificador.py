# docbr/domain/shared/digito_verificador.py
#
# Modulo-11 check-digit rule shared by CPF and CNPJ.
#
# Design decisions:
#   - CPF weights decrease from len+1 on the leftmost element; CNPJ weights
#     cycle 2..9 starting from the rightmost element. Both feed the same
#     modulo11() rule.
#   - Cleaning: CPF keeps ASCII digits only, CNPJ keeps ASCII letters and digits.
#
# Invariants:
#   - modulo11 always returns an int in [0, 9].
#   - Every function is pure: no I/O, no shared state.
from __future__ import annotations

import re
from collections.abc import Sequence

_NAO_DIGITO = re.compile(r"[^0-9]")
_NAO_ALFANUMERICO = re.compile(r"[^a-zA-Z0-9]")


def modulo11(soma: int) -> int:
    """Resto < 2 vira 0, caso contrario 11 - resto."""
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def soma_pesos_decrescentes(valores: Sequence[int]) -> int:
    """Soma ponderada com peso len+1 no primeiro elemento, decrescendo 1 por posicao."""
    peso_inicial = len(valores) + 1
    return sum(valor * (peso_inicial - i) for i, valor in enumerate(valores))


def soma_pesos_ciclicos(valores: Sequence[int]) -> int:
    """Soma ponderada da direita para a esquerda com pesos 2..9 ciclicos."""
    soma = 0
    peso = 2
    for valor in reversed(valores):
        soma += valor * peso
        peso = 2 if peso == 9 else peso + 1
    return soma


def apenas_digitos(raw: str) -> str:
    return _NAO_DIGITO.sub("", raw)


def apenas_alfanumericos(raw: str) -> str:
    return _NAO_ALFANUMERICO.sub("", raw)


def sequencia_repetida(valor: str) -> bool:
    """True para '00000000000', '11111111111111' etc."""
    return len(valor) > 1 and len(set(valor)) == 1
