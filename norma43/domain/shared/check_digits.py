"""
Dígitos de control de cuentas españolas (CCC) y derivación del IBAN.

CCC (Código Cuenta Cliente), 20 dígitos:
    EEEE OOOO DD NNNNNNNNNN
    entidad  oficina  control  cuenta

Los dos dígitos de control se calculan por separado:
- El primero sobre entidad + oficina (8 dígitos).
- El segundo sobre el número de cuenta (10 dígitos).

El IBAN español es 'ES' + 2 dígitos de control (ISO 7064 mod-97-10) + CCC.
Todo el cálculo usa enteros de Python (precisión arbitraria): el número
que se reduce módulo 97 tiene 26 dígitos y no cabe en 64 bits.
"""

import re

# Pesos alineados al dígito de la derecha: el índice 0 multiplica el
# último dígito, el índice 1 el penúltimo, etc.
CCC_WEIGHTS: tuple[int, ...] = (6, 3, 7, 9, 10, 5, 8, 4, 2, 1)

_DIGITS_RE = re.compile(r"[0-9]+")
_COUNTRY_RE = re.compile(r"[A-Z]{2}")
_IBAN_RE = re.compile(r"[A-Z]{2}[0-9]{2}[A-Z0-9]+")


def compute_ccc_check_digits(bank: str, office: str, account: str) -> str:
    """Calcula los 2 dígitos de control de un CCC.

    Args:
        bank: Código de entidad (4 dígitos).
        office: Código de oficina (4 dígitos).
        account: Número de cuenta (10 dígitos).

    Returns:
        String de 2 dígitos. El primero corresponde a entidad+oficina.

    Raises:
        ValueError: Si algún grupo no tiene la longitud esperada o
                    contiene caracteres no numéricos.

    Ejemplos:
        >>> compute_ccc_check_digits("2100", "0418", "0200051332")
        '45'
    """
    _require_digits(bank, 4, "entidad")
    _require_digits(office, 4, "oficina")
    _require_digits(account, 10, "cuenta")

    return f"{_check_digit(bank + office)}{_check_digit(account)}"


def ccc_to_iban(country_code: str, ccc: str) -> str:
    """Deriva el IBAN a partir del código de país y el CCC.

    Args:
        country_code: Código ISO 3166 de 2 letras ('ES').
        ccc: Identificador nacional (20 dígitos para España).

    Returns:
        IBAN sin espacios: país + 2 dígitos de control + ccc.

    Raises:
        ValueError: Si el país no son 2 letras o el ccc no es numérico.

    Ejemplos:
        >>> ccc_to_iban("ES", "21000418450200051332")
        'ES9121000418450200051332'
    """
    country = country_code.upper() if isinstance(country_code, str) else ""
    if not _COUNTRY_RE.fullmatch(country):
        raise ValueError(f"Código de país inválido: '{country_code}'")
    if not isinstance(ccc, str) or not _DIGITS_RE.fullmatch(ccc):
        raise ValueError(f"El CCC debe ser numérico: '{ccc}'")

    numeral = ccc + _letters_to_digits(country) + "00"
    check = 98 - int(numeral) % 97
    return f"{country}{check:02d}{ccc}"


def is_valid_iban(iban: str) -> bool:
    """Comprueba los dígitos de control de un IBAN (mod 97 == 1).

    Acepta espacios y minúsculas. Solo valida la aritmética, no la
    longitud específica de cada país.
    """
    if not isinstance(iban, str):
        return False
    compact = re.sub(r"\s+", "", iban).upper()
    if not _IBAN_RE.fullmatch(compact):
        return False
    rearranged = compact[4:] + compact[:4]
    return int(_letters_to_digits(rearranged)) % 97 == 1


def format_iban(iban: str) -> str:
    """Agrupa un IBAN en bloques de 4 caracteres.

    >>> format_iban("ES9121000418450200051332")
    'ES91 2100 0418 4502 0005 1332'
    """
    compact = re.sub(r"\s+", "", iban).upper()
    return " ".join(compact[i : i + 4] for i in range(0, len(compact), 4))


# ============================================================
# FUNCIONES INTERNAS
# ============================================================


def _check_digit(digits: str) -> str:
    total = sum(
        int(digit) * weight for digit, weight in zip(reversed(digits), CCC_WEIGHTS)
    )
    result = 11 - total % 11
    if result == 11:
        return "0"
    if result == 10:
        return "1"
    return str(result)


def _letters_to_digits(text: str) -> str:
    """A → 10, B → 11, ..., Z → 35. Los dígitos se dejan igual."""
    return "".join(str(int(char, 36)) for char in text)


def _require_digits(value: str, length: int, name: str) -> None:
    if not isinstance(value, str) or len(value) != length or not _DIGITS_RE.fullmatch(value):
        raise ValueError(f"El campo {name} debe tener {length} dígitos: '{value}'")
