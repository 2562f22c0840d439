# docbr/cnpj.py
#
# Public CNPJ surface: generate, is_valid, format, for numeric and
# alphanumeric CNPJs.
from docbr.domain.cnpj.services import format, generate, is_valid  # noqa: A004
from docbr.domain.cnpj.tipos import TipoCNPJ

__all__ = ["generate", "is_valid", "format", "TipoCNPJ"]
