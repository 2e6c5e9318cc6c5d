"""
Excepciones de dominio del proyecto norma43-parser.

Jerarquía:
    ParserBaseError
    ├── UnknownCurrencyError          → Divisa fuera de la tabla ISO-4217 soportada
    ├── FormatoInvalidoError          → El archivo no existe o no es un fichero N43
    ├── ExtractionError               → Error al leer/decodificar el archivo
    ├── ParseError                    → Error estructural o de formato en una línea
    │   ├── InvalidRecordTypeError    → Código de registro desconocido
    │   ├── MissingAccountContextError → Registro que necesita una cuenta abierta
    │   ├── MissingEntryContextError  → Registro que necesita un movimiento abierto
    │   ├── RecordCountMismatchError  → El registro 88 declara otro número de líneas
    │   └── InvalidFieldError         → Campo de ancho fijo con valor no decodificable
    └── OutputError                   → Error al generar el archivo de salida

Cualquier ParseError aborta el parseo completo: una línea mal formada
invalida todo el fichero.
"""


class ParserBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta."""


class UnknownCurrencyError(ParserBaseError):
    """Se lanza cuando un código de divisa (alfabético o numérico) no está
    en la tabla de divisas soportadas."""

    def __init__(self, code: str | int):
        self.code = code
        super().__init__(f"Divisa no reconocida: '{code}'")


class FormatoInvalidoError(ParserBaseError):
    """Se lanza cuando un archivo no tiene el formato esperado.

    Ejemplos:
    - Se esperaba un fichero N43 pero el archivo es un .pdf.
    - El archivo no existe.
    """

    def __init__(self, archivo: str, formato_esperado: str, detalle: str = ""):
        self.archivo = archivo
        self.formato_esperado = formato_esperado
        self.detalle = detalle
        mensaje = f"Formato inválido en '{archivo}'. Se esperaba: {formato_esperado}"
        if detalle:
            mensaje += f" — {detalle}"
        super().__init__(mensaje)


class ExtractionError(ParserBaseError):
    """Se lanza cuando falla la lectura del texto de un archivo.

    Esto puede pasar porque:
    - No hay permisos de lectura.
    - Los bytes no son válidos en la codificación configurada.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error extrayendo texto de '{archivo}': {causa}")


class ParseError(ParserBaseError):
    """Error estructural o de formato detectado durante el parseo.

    `line_index` es el número de registros no vacíos procesados antes de
    la línea que falla, es decir, su posición en base 0 sin contar las
    líneas en blanco. None cuando el error no corresponde a una línea.
    """

    def __init__(self, causa: str, line_index: int | None = None):
        self.causa = causa
        self.line_index = line_index
        mensaje = causa
        if line_index is not None:
            mensaje = f"Línea {line_index}: {causa}"
        super().__init__(mensaje)


class InvalidRecordTypeError(ParseError):
    """El código de registro (2 primeros caracteres) no es 11, 22, 23, 24,
    33 ni 88.

    `code_text` es el texto tal como aparece en la línea; `code` es su
    valor numérico, o None si no son dos dígitos.
    """

    def __init__(self, code_text: str, line_index: int, code: int | None = None):
        self.code_text = code_text
        self.code = code
        super().__init__(f"Tipo de registro inválido '{code_text}'", line_index)


class MissingAccountContextError(ParseError):
    """Un registro 22 o 33 llegó sin una cuenta abierta (registro 11)."""

    def __init__(self, code: int, line_index: int):
        self.code = code
        self.code_text = f"{code:02d}"
        super().__init__(
            f"Registro {code} sin cuenta abierta (falta el registro 11)", line_index
        )


class MissingEntryContextError(ParseError):
    """Un registro 23 o 24 llegó sin un movimiento abierto (registro 22)."""

    def __init__(self, code: int, line_index: int):
        self.code = code
        self.code_text = f"{code:02d}"
        super().__init__(
            f"Registro {code} sin movimiento abierto (falta el registro 22)", line_index
        )


class RecordCountMismatchError(ParseError):
    """El número de registros declarado en el 88 no coincide con las líneas
    procesadas antes de él."""

    def __init__(self, declared: int, actual: int, line_index: int | None = None):
        self.declared = declared
        self.actual = actual
        super().__init__(
            f"El número de registros no coincide con el declarado en el registro final: "
            f"declarado {declared}, procesados {actual}",
            line_index,
        )


class InvalidFieldError(ParseError):
    """Un campo de ancho fijo no se pudo decodificar (fecha o número)."""

    def __init__(self, field: str, value: str, line_index: int | None = None, detalle: str = ""):
        self.field = field
        self.value = value
        self.detalle = detalle
        causa = f"Valor inválido en el campo '{field}': '{value}'"
        if detalle:
            causa += f" — {detalle}"
        super().__init__(causa, line_index)


class OutputError(ParserBaseError):
    """Se lanza cuando falla la generación del archivo de salida.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    - Hay un error en el formato del Excel.
    """

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
