# tests/domain/test_cnpj_alfanumerico.py
#
# Alphanumeric CNPJ engine: letter table, DVs, integer comparison of DVs.
import random
import string

from docbr.domain.cnpj.alfanumerico import (
    VALORES_LETRAS,
    calcular_digitos,
    converter,
    gerar_alfanumerico,
    gerar_base_alfanumerica,
    validar_alfanumerico,
)


def test_tabela_de_letras_e_codigo_ascii_menos_48():
    assert len(VALORES_LETRAS) == 26
    assert VALORES_LETRAS["A"] == 17
    assert VALORES_LETRAS["Z"] == 42
    for letra in string.ascii_uppercase:
        assert VALORES_LETRAS[letra] == ord(letra) - 48


def test_converter_digitos_e_letras():
    assert converter("12ABC3") == [1, 2, 17, 18, 19, 3]


def test_converter_caractere_fora_da_tabela_vale_zero():
    assert converter("a-Z") == [0, 0, 42]


def test_calcular_digitos_com_letras():
    assert calcular_digitos(list("12ABC34501DE")) == (3, 5)
    assert calcular_digitos(converter("12ABC34501DE")) == (3, 5)


def test_validar_alfanumerico():
    assert validar_alfanumerico("12ABC34501DE35") is True
    assert validar_alfanumerico("12ABC34501DE36") is False


def test_validar_alfanumerico_compara_dvs_como_inteiro():
    """DVs (0, 8) viram 8; '08' e '8A' tambem viram 8."""
    assert calcular_digitos(list("000000020000")) == (0, 8)
    assert validar_alfanumerico("00000002000008") is True
    assert validar_alfanumerico("0000000200008A") is True
    assert validar_alfanumerico("0000000200009A") is False


def test_validar_alfanumerico_final_sem_digitos_nunca_confere():
    assert validar_alfanumerico("12ABC34501DEAB") is False


def test_validar_alfanumerico_base_crua_de_12():
    """Com 12 caracteres a string inteira e a base; 'DE' nao e numero."""
    assert validar_alfanumerico("12ABC34501DE") is False


def test_letras_minusculas_valem_zero():
    assert validar_alfanumerico("12abc34501de35") is False
    assert validar_alfanumerico("12abc34501de06") is True


def test_base_alfanumerica_tem_12_simbolos():
    base = gerar_base_alfanumerica(random.Random(0))
    assert len(base) == 12
    for simbolo in base:
        assert (isinstance(simbolo, int) and 0 <= simbolo <= 9) or simbolo in string.ascii_uppercase


def test_base_alfanumerica_mistura_letras_e_digitos():
    rng = random.Random(2)
    simbolos = [s for _ in range(50) for s in gerar_base_alfanumerica(rng)]
    assert any(isinstance(s, int) for s in simbolos)
    assert any(isinstance(s, str) for s in simbolos)


def test_gerar_alfanumerico_valido():
    rng = random.Random(42)
    for _ in range(200):
        cnpj = gerar_alfanumerico(rng=rng)
        assert len(cnpj) == 14
        assert cnpj[-2:].isdigit()
        assert validar_alfanumerico(cnpj)
