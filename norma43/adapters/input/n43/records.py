"""
Decodificadores de registros Norma 43.

Cada tipo de línea se identifica por sus 2 primeros caracteres:

    11  Cabecera de cuenta                 → Account
    22  Movimiento (registro principal)    → Entry
    23  Concepto complementario            → (slot, texto)
    24  Equivalencia de divisa             → (divisa, importe)
    33  Final de cuenta                    → saldo final
    88  Final de fichero                   → número de registros declarado

Todos los decodificadores son funciones puras sobre una sola línea. No
conocen el cursor del parser ni las líneas siguientes; el N43Parser
decide a qué cuenta o movimiento se aplica lo que devuelven.

Las posiciones son [inicio, longitud) en base 0 sobre la línea ya
decodificada. Un campo fecha o numérico ilegible lanza InvalidFieldError
sin número de línea; el parser lo completa.
"""

import re
from datetime import date
from decimal import Decimal

from norma43.domain.exceptions import InvalidFieldError
from norma43.domain.models.account import Account
from norma43.domain.models.entry import Entry
from norma43.domain.models.movement_type import MovementType
from norma43.domain.shared.currency import number_to_code
from norma43.domain.shared.date_parser import parse_n43_date
from norma43.domain.shared.money import parse_fixed_amount
from norma43.domain.shared.text_cleaner import field, strip_leading_zeros

RECORD_ACCOUNT_HEADER = 11
RECORD_ENTRY = 22
RECORD_CONCEPT = 23
RECORD_EQUIVALENCE = 24
RECORD_ACCOUNT_TRAILER = 33
RECORD_FILE_TRAILER = 88

_DIGITS_RE = re.compile(r"[0-9]+")


def decode_account_header(line: str) -> Account:
    """Registro 11: cabecera de cuenta (obligatorio).

    Los campos se leen en orden de columna: un error indica la primera
    columna ilegible.

    El saldo inicial se niega cuando la clave es '1' (debe).
    """
    bank = _digits(line, 2, 4, "bank")
    office = _digits(line, 6, 4, "office")
    account = _digits(line, 10, 10, "account")
    date_start = _date(line, 20, "date_start")
    date_end = _date(line, 26, "date_end")
    account_type = MovementType.from_code(field(line, 32, 1))
    balance_initial = _amount(line, 33, 45, "balance_initial")
    if account_type is MovementType.DEBIT:
        balance_initial = -balance_initial

    return Account(
        bank=bank,
        office=office,
        account=account,
        date_start=date_start,
        date_end=date_end,
        type=account_type,
        balance_initial=balance_initial,
        currency=_currency(line, 47, "currency"),
        mode=field(line, 50, 1),
        owner_name=field(line, 51, 26).strip(),
    )


def decode_entry(line: str) -> Entry:
    """Registro 22: movimiento (obligatorio).

    El importe se deja con el signo del fichero (siempre positivo).
    """
    date_raw = field(line, 10, 6)
    return Entry(
        office=strip_leading_zeros(field(line, 6, 4)),
        date=_date(line, 10, "date"),
        date_raw=date_raw,
        date_value=_date(line, 16, "date_value"),
        concept_common=field(line, 22, 2),
        concept_own=field(line, 24, 3),
        type=MovementType.from_code(field(line, 27, 1)),
        amount=_amount(line, 28, 40, "amount"),
        document=strip_leading_zeros(field(line, 42, 10)),
        reference_1=strip_leading_zeros(field(line, 52, 12)),
        reference_2=field(line, 64, 16).strip(),
        raw=line,
    )


def decode_concept(line: str) -> tuple[str, str]:
    """Registro 23: concepto complementario (opcional).

    Returns:
        (slot, texto). El slot son los 2 caracteres tras el código
        ('01'..'05'); el texto es el resto de la línea recortado.
    """
    return field(line, 2, 2), field(line, 4).strip()


def decode_equivalence(line: str) -> tuple[str, Decimal]:
    """Registro 24: equivalencia del importe en otra divisa (opcional).

    Returns:
        (divisa ISO-4217 alfabética, importe equivalente).
    """
    return _currency(line, 4, "currency_eq"), _amount(line, 7, 19, "amount_eq")


def decode_account_trailer(line: str) -> Decimal:
    """Registro 33: final de cuenta. Devuelve el saldo final.

    Los totales de debe/haber que también trae este registro no se
    contrastan con los movimientos.
    """
    return _amount(line, 59, 71, "balance_end")


def decode_file_trailer(line: str) -> int:
    """Registro 88: final de fichero. Devuelve el número de registros
    declarado."""
    return int(_digits(line, 20, 6, "record_count"))


# ============================================================
# FUNCIONES INTERNAS
# ============================================================


def _digits(line: str, start: int, length: int, name: str) -> str:
    value = field(line, start, length)
    if len(value) != length or not _DIGITS_RE.fullmatch(value):
        raise InvalidFieldError(name, value, detalle=f"se esperaban {length} dígitos")
    return value


def _date(line: str, start: int, name: str) -> date:
    value = field(line, start, 6)
    try:
        return parse_n43_date(value)
    except ValueError as e:
        raise InvalidFieldError(name, value, detalle=str(e)) from e


def _amount(line: str, integer_start: int, fraction_start: int, name: str) -> Decimal:
    integer_part = field(line, integer_start, 12)
    fraction_part = field(line, fraction_start, 2)
    try:
        return parse_fixed_amount(integer_part, fraction_part)
    except ValueError as e:
        raise InvalidFieldError(name, f"{integer_part}{fraction_part}", detalle=str(e)) from e


def _currency(line: str, start: int, name: str) -> str:
    """Resuelve la divisa numérica; UnknownCurrencyError se propaga tal cual."""
    return number_to_code(int(_digits(line, start, 3, name)))
