"""
Modelos de dominio del proyecto norma43-parser.

Account y Entry son dataclasses mutables: el parser los crea al leer su
registro de cabecera y los completa con los registros complementarios
que le siguen. ParseResult es inmutable.

Uso:
    from norma43.domain.models import Account, Entry, MovementType, ParseResult
"""

from norma43.domain.models.account import Account
from norma43.domain.models.entry import Entry
from norma43.domain.models.movement_type import MovementType
from norma43.domain.models.parse_result import ParseResult

__all__ = [
    "Account",
    "Entry",
    "MovementType",
    "ParseResult",
]
