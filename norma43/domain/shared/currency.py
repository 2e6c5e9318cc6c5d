"""
Tabla de divisas ISO-4217 (código alfabético ↔ código numérico).

Los ficheros Norma 43 guardan la divisa como código numérico de 3 dígitos
(ej: '978'). El resto del sistema trabaja con el código alfabético ('EUR').

Solo se soporta un conjunto fijo y pequeño de divisas. Cualquier otra
entrada lanza UnknownCurrencyError: no hay coincidencias parciales.
"""

from types import MappingProxyType

from norma43.domain.exceptions import UnknownCurrencyError

_CURRENCIES = MappingProxyType(
    {
        "EUR": 978,
        "USD": 840,
        "GBP": 426,
        "JPY": 392,
        "CNY": 156,
    }
)

_CODES_BY_NUMBER = MappingProxyType({number: code for code, number in _CURRENCIES.items()})


def code_to_number(code: str) -> int:
    """Convierte un código alfabético ('eur', 'EUR') a su código numérico.

    Raises:
        UnknownCurrencyError: Si el código no está en la tabla.

    Ejemplos:
        >>> code_to_number("EUR")
        978
        >>> code_to_number("usd")
        840
    """
    if not isinstance(code, str):
        raise UnknownCurrencyError(code)
    number = _CURRENCIES.get(code.strip().upper())
    if number is None:
        raise UnknownCurrencyError(code)
    return number


def number_to_code(number: int) -> str:
    """Convierte un código numérico (978) a su código alfabético ('EUR').

    Raises:
        UnknownCurrencyError: Si el número no está en la tabla.
    """
    # bool es subclase de int; True no es una divisa
    if isinstance(number, bool) or not isinstance(number, int):
        raise UnknownCurrencyError(number)
    code = _CODES_BY_NUMBER.get(number)
    if code is None:
        raise UnknownCurrencyError(number)
    return code

