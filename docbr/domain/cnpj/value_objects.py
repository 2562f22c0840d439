# docbr/domain/cnpj/value_objects.py
from __future__ import annotations

import random
from dataclasses import dataclass

from docbr.domain.cnpj import services
from docbr.domain.cnpj.numerico import CNPJ_LENGTH
from docbr.domain.cnpj.tipos import TipoCNPJ
from docbr.domain.shared.digito_verificador import apenas_alfanumericos, sequencia_repetida


@dataclass(frozen=True)
class CNPJ:
    """Value Object imutavel para CNPJ numerico ou alfanumerico. Valida DVs no construtor."""

    _valor: str  # sempre 14 caracteres sem formatacao

    def __init__(self, raw: str) -> None:
        limpo = apenas_alfanumericos(raw)
        if len(limpo) != CNPJ_LENGTH:
            raise ValueError(f"CNPJ invalido: comprimento {len(limpo)}, esperado 14")
        if sequencia_repetida(limpo):
            raise ValueError("CNPJ invalido: todos caracteres iguais")
        if not services.is_valid(limpo):
            raise ValueError("CNPJ invalido: digitos verificadores incorretos")
        object.__setattr__(self, "_valor", limpo)

    @classmethod
    def gerar(
        cls,
        tipo: TipoCNPJ | str = TipoCNPJ.NUMERICO,
        rng: random.Random | None = None,
    ) -> CNPJ:
        return cls(services.generate(tipo=tipo, rng=rng))

    @property
    def valor(self) -> str:
        """14 caracteres sem formatacao."""
        return self._valor

    @property
    def tipo(self) -> TipoCNPJ:
        return TipoCNPJ.NUMERICO if self._valor.isdigit() else TipoCNPJ.ALFANUMERICO

    @property
    def raiz(self) -> str:
        """8 primeiros caracteres: identificam a empresa."""
        return self._valor[:8]

    @property
    def ordem(self) -> str:
        """Caracteres 9-12: identificam o estabelecimento (0001 = matriz)."""
        return self._valor[8:12]

    @property
    def digitos_verificadores(self) -> str:
        return self._valor[12:]

    @property
    def formatado(self) -> str:
        """XX.XXX.XXX/XXXX-XX"""
        return services.format(self._valor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CNPJ):
            return NotImplemented
        return self._valor == other._valor

    def __hash__(self) -> int:
        return hash(self._valor)

    def __repr__(self) -> str:
        return f"CNPJ({self.formatado!r})"

    def __str__(self) -> str:
        return self.formatado
