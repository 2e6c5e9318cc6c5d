"""
Puerto de entrada: Extractor de texto.

Define el contrato para leer un archivo de extracto y entregar su
contenido como texto normalizado (decodificado y con saltos de línea
'\n'). La decodificación de bytes es responsabilidad del extractor, no
del parser.

    TextExtractor (interfaz)
    └── N43FileExtractor     → ficheros .n43/.txt/.aeb/... en latin-1
"""

from abc import ABC, abstractmethod
from pathlib import Path


class TextExtractor(ABC):
    """Interfaz para extraer texto de un archivo."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """Determina si este extractor puede manejar el archivo dado.

        El StatementProcessor usa el primer extractor cuyo can_handle
        devuelva True.
        """
        ...

    @abstractmethod
    def extract(self, file_path: Path) -> str:
        """Lee el archivo y devuelve su contenido normalizado.

        Raises:
            FormatoInvalidoError: Si el archivo no existe o no es del tipo
                                  esperado.
            ExtractionError: Si falla la lectura o la decodificación.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible del extractor. Para logging y debugging."""
        ...
