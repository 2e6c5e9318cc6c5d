"""
Adaptador de salida: Logger a consola.

Imprime una línea por evento de procesamiento y, al terminar, un resumen
con los contadores acumulados. Por defecto escribe en stdout; los tests
pueden pasar cualquier stream de texto.
"""

import sys
from decimal import Decimal
from pathlib import Path
from typing import TextIO

from norma43.domain.ports.process_logger import ProcessLogger
from norma43.domain.shared.check_digits import format_iban
from norma43.domain.shared.money import format_money

_SEPARATOR = "=" * 60


class ConsoleLogger(ProcessLogger):
    """Bitácora de ficheros N43 en consola."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._recibidos = 0
        self._procesados = 0
        self._descartados = 0
        self._cuentas = 0
        self._movimientos = 0
        self._salidas: list[Path] = []
        self._errores: list[dict] = []

    def _emit(self, texto: str) -> None:
        print(texto, file=self._stream or sys.stdout)

    def log_file_received(self, file_path: Path, file_type: str) -> None:
        self._recibidos += 1
        self._emit(f"  📄 Recibido: {file_path.name} ({file_type or 'sin extensión'})")

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        self._descartados += 1
        self._emit(f"  ⏭️  Descartado: {file_path.name} ({reason})")

    def log_extraction_start(self, file_path: Path, extractor_name: str) -> None:
        self._emit(f"  🔍 Leyendo ({extractor_name}): {file_path.name}")

    def log_parse_complete(self, file_path: Path, num_accounts: int, num_entries: int) -> None:
        self._procesados += 1
        self._cuentas += num_accounts
        self._movimientos += num_entries
        self._emit(
            f"  ✅ {file_path.name}: {num_accounts} cuentas, {num_entries} movimientos"
        )

    def log_account_read(
        self, file_path: Path, iban: str, currency: str, balance_end: Decimal | None
    ) -> None:
        if balance_end is None:
            saldo = "sin registro final"
        else:
            saldo = f"saldo final {format_money(balance_end, currency)}"
        self._emit(f"  💶 {format_iban(iban)}: {saldo}")

    def log_error(self, file_path: Path, error: Exception) -> None:
        self._errores.append({"archivo": file_path.name, "error": str(error)})
        self._emit(f"  ❌ {file_path.name}: {type(error).__name__}: {error}")

    def log_output_written(self, output_path: Path) -> None:
        self._salidas.append(output_path)
        self._emit(f"  📁 Generado: {output_path}")

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._recibidos,
            "archivos_procesados": self._procesados,
            "archivos_descartados": self._descartados,
            "archivos_con_error": len(self._errores),
            "total_cuentas": self._cuentas,
            "total_movimientos": self._movimientos,
            "archivos_generados": [str(p) for p in self._salidas],
            "errores": list(self._errores),
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        summary = self.get_summary()
        lineas = [
            "",
            _SEPARATOR,
            "RESUMEN DE PROCESAMIENTO",
            _SEPARATOR,
            f"  Ficheros recibidos:   {summary['archivos_recibidos']}",
            f"  Ficheros procesados:  {summary['archivos_procesados']}",
            f"  Ficheros descartados: {summary['archivos_descartados']}",
            f"  Ficheros con error:   {summary['archivos_con_error']}",
            f"  Cuentas leídas:       {summary['total_cuentas']}",
            f"  Movimientos leídos:   {summary['total_movimientos']}",
            f"  Excel generados:      {len(summary['archivos_generados'])}",
        ]
        if self._errores:
            lineas.append("")
            lineas.append("  ERRORES:")
            lineas.extend(f"    - {e['archivo']}: {e['error']}" for e in self._errores)
        lineas.append(_SEPARATOR)

        for linea in lineas:
            self._emit(linea)
