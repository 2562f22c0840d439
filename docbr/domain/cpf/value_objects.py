# docbr/domain/cpf/value_objects.py
from __future__ import annotations

import random
from dataclasses import dataclass

from docbr.domain.cpf import services
from docbr.domain.shared.digito_verificador import apenas_digitos, sequencia_repetida


@dataclass(frozen=True)
class CPF:
    """Value Object imutavel para CPF. NUNCA expoe valor completo em repr/str (LGPD)."""
    _valor: str  # sempre 11 digitos

    def __init__(self, raw: str) -> None:
        digitos = apenas_digitos(raw)
        if len(digitos) != services.CPF_LENGTH:
            raise ValueError(f"CPF invalido: comprimento {len(digitos)}, esperado 11")
        if sequencia_repetida(digitos):
            raise ValueError("CPF invalido: todos digitos iguais")
        if digitos in services.CPF_BLACKLIST:
            raise ValueError("CPF invalido: sequencia de exemplo")
        if not services.is_valid(digitos):
            raise ValueError("CPF invalido: digitos verificadores incorretos")
        object.__setattr__(self, "_valor", digitos)

    @classmethod
    def gerar(cls, rng: random.Random | None = None) -> CPF:
        return cls(services.generate(rng=rng))

    @property
    def valor(self) -> str:
        """11 digitos sem formatacao. Nunca logar."""
        return self._valor

    @property
    def formatado(self) -> str:
        return services.format(self._valor)

    @property
    def mascarado(self) -> str:
        """***.XXX.XXX-**, formato seguro para logs."""
        d = self._valor
        return f"***.{d[3:6]}.{d[6:9]}-**"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CPF):
            return NotImplemented
        return self._valor == other._valor

    def __hash__(self) -> int:
        return hash(self._valor)

    def __repr__(self) -> str:
        return f"CPF({self.mascarado!r})"

    def __str__(self) -> str:
        return self.mascarado
