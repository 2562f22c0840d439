# tests/domain/test_cnpj_numerico.py
#
# Classic (all-digit) CNPJ engine.
import random

from docbr.domain.cnpj.numerico import (
    calcular_digito,
    calcular_digitos,
    formato_valido,
    gerar_numerico,
    validar_numerico,
)


def test_calcular_digito_pesos_ciclicos():
    assert calcular_digito([5, 4, 5, 5, 0, 7, 5, 2, 0, 0, 0, 1]) == 5
    assert calcular_digito([2, 5, 1, 4, 3, 8, 1, 5, 0, 0, 1, 5]) == 5


def test_calcular_digitos_segundo_depende_do_primeiro():
    assert calcular_digitos([5, 4, 5, 5, 0, 7, 5, 2, 0, 0, 0, 1]) == (5, 5)
    assert calcular_digitos([2, 5, 1, 4, 3, 8, 1, 5, 0, 0, 1, 5]) == (5, 6)


def test_validar_numerico_limpa_pontuacao():
    assert validar_numerico("54.550.752/0001-55") is True
    assert validar_numerico("54550752000155") is True


def test_validar_numerico_dv_errado():
    assert validar_numerico("54550752000156") is False
    assert validar_numerico("54550752000165") is False


def test_formato_valido():
    assert formato_valido("54550752000155") is True
    assert formato_valido("5455075200015") is False
    assert formato_valido("00000000000000") is False


def test_zeros_passam_no_checksum_mas_sao_rejeitados():
    assert calcular_digitos([0] * 12) == (0, 0)
    assert validar_numerico("00000000000000") is False


def test_gerar_numerico_valido():
    rng = random.Random(42)
    for _ in range(200):
        cnpj = gerar_numerico(rng=rng)
        assert len(cnpj) == 14
        assert cnpj.isdigit()
        assert validar_numerico(cnpj)


def test_validar_numerico_dvs_cinco_e_seis():
    assert validar_numerico("25143815000156") is True
    assert validar_numerico("25.143.815/0001-56") is True
    assert validar_numerico("25143815000151") is False


def test_validar_numerico_rejeita_digitos_nao_ascii():
    """Digitos fullwidth sao descartados na limpeza, como qualquer nao digito."""
    assert validar_numerico("５４５５０７５２０００１５５") is False
    assert validar_numerico("５４.５５０.７５２/０００１-５５") is False
