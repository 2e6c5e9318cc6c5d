"""
Conversión de fechas Norma 43.

Todas las fechas del formato (inicio/fin de periodo, fecha de operación,
fecha valor) se guardan como AAMMDD: 6 dígitos con año de 2 dígitos.

Siempre se devuelve un objeto `date` de Python (no string) y se lanzan
errores claros cuando no se puede parsear.
"""

import re
from datetime import date

_N43_DATE_RE = re.compile(r"([0-9]{2})([0-9]{2})([0-9]{2})")


def parse_n43_date(date_text: str) -> date:
    """Parsea una fecha AAMMDD a un objeto date.

    Args:
        date_text: Texto de 6 dígitos tal como aparece en la línea.

    Returns:
        Objeto date de Python.

    Raises:
        ValueError: Si no son 6 dígitos o la fecha no existe (ej: 31 de
                    febrero).

    Ejemplos:
        >>> parse_n43_date("240105")
        datetime.date(2024, 1, 5)
        >>> parse_n43_date("991231")
        datetime.date(1999, 12, 31)
    """
    text = date_text.strip()

    if not text:
        raise ValueError("El texto de fecha está vacío")

    m = _N43_DATE_RE.fullmatch(text)
    if not m:
        raise ValueError(f"Formato de fecha no reconocido: '{text}'. Se esperaba AAMMDD")

    year = _expand_year(int(m.group(1)))
    month = int(m.group(2))
    day = int(m.group(3))
    return _build_date(year, month, day, text)


# ============================================================
# FUNCIONES INTERNAS (prefijo _ = no exportadas)
# ============================================================


def _expand_year(year_short: int) -> int:
    """Expande un año de 2 dígitos a 4 dígitos.

    Regla: 00-49 → 2000-2049, 50-99 → 1950-1999.
    Si ya tiene 4 dígitos, lo devuelve tal cual.
    """
    if year_short >= 100:
        return year_short
    if year_short < 50:
        return 2000 + year_short
    return 1900 + year_short


def _build_date(year: int, month: int, day: int, original_text: str) -> date:
    """Construye un objeto date con validación.

    Centraliza el manejo de fechas imposibles (31 de febrero, mes 13) y da
    un mensaje que incluye el texto original.
    """
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ValueError(
            f"Fecha inválida construida de '{original_text}': "
            f"año={year}, mes={month}, día={day} — {e}"
        ) from e
