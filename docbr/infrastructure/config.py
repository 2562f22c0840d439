# docbr/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Configuracao imutavel lida do ambiente.

    Invariants:
      - seed None = geracao nao deterministica.
      - lote_tamanho >= 1.
    """

    seed: int | None
    lote_tamanho: int


def _int_opcional(nome: str) -> int | None:
    raw = os.environ.get(nome, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as err:
        raise ValueError(f"{nome} deve ser inteiro, recebido {raw!r}") from err


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    lote_tamanho = _int_opcional("DOCBR_LOTE_TAMANHO")
    if lote_tamanho is None:
        lote_tamanho = 100
    if lote_tamanho < 1:
        raise ValueError(f"DOCBR_LOTE_TAMANHO deve ser positivo, recebido {lote_tamanho}")

    return Settings(
        seed=_int_opcional("DOCBR_SEED"),
        lote_tamanho=lote_tamanho,
    )
