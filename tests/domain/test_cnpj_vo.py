import dataclasses
import random

import pytest

from docbr.domain.cnpj.tipos import TipoCNPJ
from docbr.domain.cnpj.value_objects import CNPJ


def test_cnpj_valido_formatado():
    """Aceita CNPJ com pontuacao e armazena sem formatacao."""
    cnpj = CNPJ("11.222.333/0001-81")
    assert cnpj.valor == "11222333000181"


def test_cnpj_valido_sem_formatacao():
    """Aceita CNPJ sem pontuacao e gera formatacao."""
    cnpj = CNPJ("11222333000181")
    assert cnpj.formatado == "11.222.333/0001-81"


def test_cnpj_digitos_verificadores_invalidos():
    """Rejeita CNPJ com digitos verificadores errados."""
    with pytest.raises(ValueError, match="CNPJ invalido"):
        CNPJ("11.222.333/0001-99")


def test_cnpj_todos_iguais_invalido():
    """CNPJs com todos caracteres iguais sao invalidos."""
    with pytest.raises(ValueError, match="todos caracteres iguais"):
        CNPJ("00.000.000/0000-00")
    with pytest.raises(ValueError):
        CNPJ("11111111111111")
    with pytest.raises(ValueError):
        CNPJ("AAAAAAAAAAAAAA")


def test_cnpj_comprimento_errado():
    """Rejeita strings com menos ou mais de 14 caracteres."""
    with pytest.raises(ValueError, match="comprimento"):
        CNPJ("123")
    with pytest.raises(ValueError):
        CNPJ("123456789012345")


def test_cnpj_imutavel():
    """frozen=True impede atribuicao."""
    cnpj = CNPJ("11222333000181")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cnpj._valor = "outro"  # type: ignore[misc]


def test_cnpj_igualdade_por_valor():
    """Dois CNPJs com mesmo numero sao iguais, independente de formatacao."""
    a = CNPJ("11222333000181")
    b = CNPJ("11.222.333/0001-81")
    assert a == b
    assert hash(a) == hash(b)


def test_cnpj_desigualdade():
    a = CNPJ("11222333000181")
    b = CNPJ("33000167000101")  # outro CNPJ valido
    assert a != b


def test_cnpj_repr_mostra_formatado():
    cnpj = CNPJ("11222333000181")
    assert "11.222.333/0001-81" in repr(cnpj)


def test_cnpj_numerico_partes():
    cnpj = CNPJ("54.550.752/0001-55")
    assert cnpj.tipo is TipoCNPJ.NUMERICO
    assert cnpj.raiz == "54550752"
    assert cnpj.ordem == "0001"
    assert cnpj.digitos_verificadores == "55"


def test_cnpj_alfanumerico_partes():
    cnpj = CNPJ("12.ABC.345/01DE-35")
    assert cnpj.valor == "12ABC34501DE35"
    assert cnpj.tipo is TipoCNPJ.ALFANUMERICO
    assert cnpj.raiz == "12ABC345"
    assert cnpj.ordem == "01DE"
    assert cnpj.digitos_verificadores == "35"
    assert str(cnpj) == "12.ABC.345/01DE-35"


def test_cnpj_gerar_alfanumerico():
    cnpj = CNPJ.gerar(TipoCNPJ.ALFANUMERICO, rng=random.Random(11))
    assert len(cnpj.valor) == 14
    assert CNPJ(cnpj.formatado) == cnpj
