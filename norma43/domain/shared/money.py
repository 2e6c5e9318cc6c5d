"""
Utilidades para manejo de importes monetarios.

En Norma 43 los importes nunca llevan separadores ni signo: se guardan en
dos columnas de ancho fijo, la parte entera (12 dígitos con ceros a la
izquierda) y los céntimos (2 dígitos). El signo lo indica un campo aparte
(clave debe/haber).

Siempre se devuelve Decimal. Un importe reconstruido con float puede
perder céntimos en sumas acumuladas.
"""

import re
from decimal import Decimal

_DIGITS_RE = re.compile(r"[0-9]+")


def parse_fixed_amount(integer_part: str, fraction_part: str) -> Decimal:
    """Reconstruye un importe a partir de sus columnas entera y decimal.

    Args:
        integer_part: Columna de la parte entera. Ej: '000000012345'.
        fraction_part: Columna de los céntimos. Ej: '67'.

    Returns:
        Decimal exacto. Ej: Decimal('12345.67').

    Raises:
        ValueError: Si alguna columna está vacía o no es numérica.

    Ejemplos:
        >>> parse_fixed_amount("000000012345", "67")
        Decimal('12345.67')
        >>> parse_fixed_amount("000000000000", "00")
        Decimal('0.00')
    """
    if not isinstance(integer_part, str) or not isinstance(fraction_part, str):
        raise TypeError("parse_fixed_amount espera columnas de tipo str")
    if not _DIGITS_RE.fullmatch(integer_part) or not _DIGITS_RE.fullmatch(fraction_part):
        raise ValueError(
            f"Importe no numérico: '{integer_part}' . '{fraction_part}'"
        )

    return Decimal(f"{int(integer_part)}.{fraction_part}")


def format_money(amount: Decimal, currency: str = "") -> str:
    """Formatea un Decimal como string legible, con 2 decimales.

    La usa la bitácora de consola para mostrar saldos.

    Ejemplos:
        >>> format_money(Decimal("1234567.8"), "EUR")
        '1,234,567.80 EUR'
        >>> format_money(Decimal("-5"))
        '-5.00'
    """
    amount = amount.quantize(Decimal("0.01"))
    text = f"{amount:,.2f}"
    if currency:
        text += f" {currency}"
    return text
