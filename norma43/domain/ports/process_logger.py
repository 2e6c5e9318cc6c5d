"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define los EVENTOS de negocio que se registran al procesar ficheros
Norma 43 ("se recibió un archivo", "se parsearon N cuentas"). La
implementación decide CÓMO se muestran: consola, archivo, memoria en
los tests.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from pathlib import Path


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    @abstractmethod
    def log_file_received(self, file_path: Path, file_type: str) -> None:
        """Registra que se recibió un archivo para procesar."""
        ...

    @abstractmethod
    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        """Registra que un archivo fue descartado.

        Args:
            file_path: Ruta del archivo descartado.
            reason: Razón del descarte. Ejemplo: "Extensión .pdf no soportada"
        """
        ...

    @abstractmethod
    def log_extraction_start(self, file_path: Path, extractor_name: str) -> None:
        """Registra el inicio de la lectura del archivo."""
        ...

    @abstractmethod
    def log_parse_complete(
        self, file_path: Path, num_accounts: int, num_entries: int
    ) -> None:
        """Registra el fin exitoso del parseo.

        Args:
            file_path: Ruta del archivo procesado.
            num_accounts: Cantidad de cuentas leídas.
            num_entries: Cantidad total de movimientos.
        """
        ...

    @abstractmethod
    def log_account_read(
        self, file_path: Path, iban: str, currency: str, balance_end: Decimal | None
    ) -> None:
        """Registra una cuenta leída del fichero.

        Args:
            file_path: Ruta del archivo procesado.
            iban: IBAN de la cuenta, sin espacios.
            currency: Divisa ISO-4217 alfabética.
            balance_end: Saldo final, o None si la cuenta no tiene
                         registro final (33).
        """
        ...

    @abstractmethod
    def log_error(self, file_path: Path, error: Exception) -> None:
        """Registra un error durante el procesamiento."""
        ...

    @abstractmethod
    def log_output_written(self, output_path: Path) -> None:
        """Registra que se generó un archivo de salida."""
        ...

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            {
                'archivos_recibidos': int,
                'archivos_procesados': int,
                'archivos_descartados': int,
                'archivos_con_error': int,
                'total_cuentas': int,
                'total_movimientos': int,
                'archivos_generados': List[str],
                'errores': List[dict],  # [{archivo, error}]
            }
        """
        ...
