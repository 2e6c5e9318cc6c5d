"""
Adaptador de entrada: Extractor de texto para ficheros Norma 43.

Los bancos generan los ficheros N43 en una codificación de un byte por
carácter (habitualmente ISO-8859-1 / latin-1, a veces cp1252). Este
adaptador:
1. Lee los bytes del archivo.
2. Los decodifica con la codificación configurada.
3. Normaliza los saltos de línea a '\\n' y elimina un posible BOM.

El parser recibe texto ya normalizado y no sabe nada de codificaciones.
"""

from pathlib import Path

from norma43.domain.exceptions import ExtractionError, FormatoInvalidoError
from norma43.domain.ports.text_extractor import TextExtractor
from norma43.domain.shared.text_cleaner import clean_n43_text

# Extensiones con las que los bancos suelen entregar el Cuaderno 43.
N43_EXTENSIONS: frozenset[str] = frozenset({".n43", ".txt", ".aeb", ".csb", ".q43", ".c43"})


class N43FileExtractor(TextExtractor):
    """Lee ficheros Norma 43 desde disco."""

    def __init__(self, encoding: str = "latin-1") -> None:
        """
        Args:
            encoding: Codificación de los bytes del archivo. Por defecto
                      latin-1, que nunca falla al decodificar.
        """
        self._encoding = encoding

    @property
    def name(self) -> str:
        return f"n43-{self._encoding}"

    @property
    def encoding(self) -> str:
        return self._encoding

    def can_handle(self, file_path: Path) -> bool:
        """Puede manejar archivos con extensión típica de N43."""
        return file_path.suffix.lower() in N43_EXTENSIONS

    def extract(self, file_path: Path) -> str:
        """Lee y decodifica el archivo completo.

        Raises:
            FormatoInvalidoError: Si el archivo no existe o su extensión no
                                  es de N43.
            ExtractionError: Si no se puede leer o decodificar.
        """
        if not file_path.is_file():
            raise FormatoInvalidoError(str(file_path), "N43", "El archivo no existe")

        if not self.can_handle(file_path):
            raise FormatoInvalidoError(
                str(file_path),
                "N43",
                f"Extensión inesperada: {file_path.suffix}",
            )

        try:
            raw = file_path.read_bytes()
        except OSError as e:
            raise ExtractionError(str(file_path), str(e)) from e

        try:
            text = raw.decode(self._encoding)
        except LookupError as e:
            raise ExtractionError(str(file_path), f"Codificación desconocida: {self._encoding}") from e
        except UnicodeDecodeError as e:
            raise ExtractionError(
                str(file_path), f"Bytes no válidos en {self._encoding}: {e.reason}"
            ) from e

        return clean_n43_text(text)
