from enum import StrEnum


class TipoCNPJ(StrEnum):
    NUMERICO = "numeric"          # classico, 14 digitos
    ALFANUMERICO = "alfanumeric"  # base com letras A-Z e digitos
