# docbr/pipeline/main.py
#
# Batch run: generate, validate and format a lote of each document kind.
#
# Design decisions:
#   - run_lote is the single entry point. Batch size and seed come from
#     Settings (DOCBR_LOTE_TAMANHO, DOCBR_SEED).
#   - The three kinds run in sequence over one random source.
#   - Each kind logs its validation summary to stdout.
#
# Invariant: with a fixed seed, run_lote returns the same DataFrame.
from __future__ import annotations

import random

import polars as pl

from docbr.domain.cnpj.tipos import TipoCNPJ
from docbr.infrastructure.config import Settings, get_settings
from docbr.infrastructure.random_source import get_rng
from docbr.pipeline.log import iniciar_relogio, log
from docbr.pipeline.transform.documentos import (
    Documento,
    apply_format_to_df,
    apply_validation_to_df,
    gerar_lote,
    resumir_validacao,
)

_LOTES: list[tuple[str, Documento, TipoCNPJ]] = [
    ("cpf", "cpf", TipoCNPJ.NUMERICO),
    ("cnpj_numerico", "cnpj", TipoCNPJ.NUMERICO),
    ("cnpj_alfanumerico", "cnpj", TipoCNPJ.ALFANUMERICO),
]

COLUNAS = ["tipo", "documento", "documento_valido", "documento_formatado"]


def run_lote(settings: Settings, *, rng: random.Random | None = None) -> pl.DataFrame:
    """Generate and check settings.lote_tamanho documents of each kind.

    Args:
        settings: Batch configuration.
        rng: Random source. Defaults to the process-wide seeded source.

    Returns:
        DataFrame with columns tipo, documento, documento_valido,
        documento_formatado; lote_tamanho rows per kind.
    """
    iniciar_relogio()
    fonte = rng or get_rng()
    log(f"Generating {settings.lote_tamanho:,} documents per kind...")

    frames: list[pl.DataFrame] = []
    for rotulo, documento, tipo in _LOTES:
        df = gerar_lote(settings.lote_tamanho, documento, tipo=tipo, rng=fonte)
        df = apply_validation_to_df(df, "documento", documento)
        df = apply_format_to_df(df, "documento", documento)

        resumo = resumir_validacao(df, "documento")
        log(f"  {rotulo}: {resumo['validos']:,}/{resumo['total']:,} validos")

        frames.append(df.with_columns(pl.lit(rotulo).alias("tipo")).select(COLUNAS))

    result = pl.concat(frames)
    log(f"Done: {len(result):,} rows")
    return result


if __name__ == "__main__":
    with pl.Config(tbl_rows=20):
        print(run_lote(get_settings()))
