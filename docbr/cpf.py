# docbr/cpf.py
#
# Public CPF surface: generate, is_valid, format.
from docbr.domain.cpf.services import format, generate, is_valid  # noqa: A004

__all__ = ["generate", "is_valid", "format"]
