"""
Utilidades de limpieza de texto.

Funciones reutilizables para normalizar el texto leído de un fichero
Norma 43 antes de que el parser lo procese, y para recortar los campos
de ancho fijo.

Estas funciones NO tienen lógica de negocio (no saben de cuentas ni
importes). Solo operan sobre strings puros.
"""


def normalize_line_endings(text: str) -> str:
    """Normaliza todos los saltos de línea a \\n.

    Los ficheros bancarios suelen venir con \\r\\n (Windows). Normalizar
    asegura que split('\\n') funcione consistentemente.
    """
    return text.replace("\r\n", "\n").replace("\r", "\n")


def strip_byte_order_mark(text: str) -> str:
    """Elimina el BOM inicial que añaden algunos editores al guardar."""
    return text[1:] if text.startswith("\ufeff") else text


def clean_n43_text(text: str) -> str:
    """Aplica todas las limpiezas comunes en secuencia.

    Es la función que los text extractors llaman después de decodificar
    los bytes del archivo, ANTES de pasar el texto al parser.

    No recorta espacios: las columnas de ancho fijo dependen de ellos.
    """
    text = strip_byte_order_mark(text)
    text = normalize_line_endings(text)
    return text


def field(line: str, start: int, length: int | None = None) -> str:
    """Extrae la columna [start, start+length) de una línea.

    Si length es None se toma hasta el final de la línea. Las líneas más
    cortas que la columna devuelven lo que haya (posiblemente '').

    Ejemplos:
        >>> field("1100490001", 2, 4)
        '0049'
        >>> field("2301CONCEPTO  ", 4)
        'CONCEPTO  '
    """
    if length is None:
        return line[start:]
    return line[start : start + length]


def strip_leading_zeros(text: str) -> str:
    """Recorta espacios y luego los ceros a la izquierda.

    Un campo con solo ceros queda como cadena vacía.

    Ejemplos:
        >>> strip_leading_zeros("0000012345")
        '12345'
        >>> strip_leading_zeros("0000")
        ''
    """
    return text.strip().lstrip("0")
