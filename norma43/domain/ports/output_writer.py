"""
Puerto de salida: Escritor de resultados.

Define el contrato para escribir las cuentas parseadas en algún formato
persistente (hoy Excel). El dominio solo produce ParseResult y lo pasa a
quien implemente este puerto.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from norma43.domain.models.parse_result import ParseResult


class OutputWriter(ABC):
    """Interfaz para escribir resultados de parseo."""

    @abstractmethod
    def write_single(self, result: ParseResult, output_path: Path) -> Path:
        """Escribe el resultado de un solo fichero.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura (permisos, disco lleno, etc.)
        """
        ...

    @abstractmethod
    def write_consolidated(self, results: list[ParseResult], output_path: Path) -> Path:
        """Escribe en un solo archivo las cuentas de varios ficheros.

        Raises:
            OutputError: Si falla la escritura o no hay resultados.
        """
        ...
