"""
Adaptador de salida: Escritor de Excel.

Genera archivos Excel con 2 hojas:
- Hoja 1 (Cuentas): una fila por cuenta, con IBAN, periodo, saldos y
  totales al debe y al haber de sus movimientos.
- Hoja 2 (Movimientos): una fila por movimiento, con los conceptos
  complementarios unidos en orden de slot.

Los importes se escriben con signo (adeudos en negativo) para que las
sumas en la hoja cuadren con los saldos.
"""

from pathlib import Path

import pandas as pd

from norma43.domain.exceptions import OutputError
from norma43.domain.models.parse_result import ParseResult
from norma43.domain.ports.output_writer import OutputWriter

SHEET_ACCOUNTS = "Cuentas"
SHEET_ENTRIES = "Movimientos"


class ExcelWriter(OutputWriter):
    """Genera archivos Excel con formato estandarizado."""

    def write_single(self, result: ParseResult, output_path: Path) -> Path:
        """Escribe las cuentas de un solo fichero a Excel.

        Si output_path no termina en .xlsx, se le agrega la extensión.
        """
        output_path = self._prepare_path(output_path)

        try:
            self._escribir_excel([result], output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e)) from e

        return output_path

    def write_consolidated(self, results: list[ParseResult], output_path: Path) -> Path:
        """Escribe las cuentas de varios ficheros en un solo Excel."""
        if not results:
            raise OutputError(str(output_path), "No hay resultados para consolidar")

        output_path = self._prepare_path(output_path)

        try:
            self._escribir_excel(results, output_path)
        except Exception as e:
            raise OutputError(str(output_path), str(e)) from e

        return output_path

    @staticmethod
    def _prepare_path(output_path: Path) -> Path:
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")
        output_path.parent.mkdir(parents=True, exist_ok=True)
        return output_path

    # =================================================================
    # MÉTODO PRIVADO: Generación del Excel
    # =================================================================

    def _escribir_excel(self, results: list[ParseResult], output_path: Path) -> None:
        """Genera el archivo Excel con las 2 hojas."""
        filas_cuentas = []
        filas_movimientos = []
        for result in results:
            for account in result.accounts:
                filas_cuentas.append(
                    {
                        "IBAN": account.iban,
                        "Entidad": account.bank,
                        "Oficina": account.office,
                        "Cuenta": account.account,
                        "Titular": account.owner_name,
                        "Moneda": account.currency,
                        "Desde": account.date_start.strftime("%d/%m/%Y"),
                        "Hasta": account.date_end.strftime("%d/%m/%Y"),
                        "Saldo Inicial": float(account.balance_initial),
                        "Saldo Final": (
                            float(account.balance_end) if account.balance_end is not None else None
                        ),
                        "Total Debe": float(account.total_debits),
                        "Total Haber": float(account.total_credits),
                        "Cerrada": "Sí" if account.is_closed else "No",
                        "Num Movimientos": len(account.entries),
                        "Archivo": result.source_file,
                    }
                )
                for entry in account.entries:
                    filas_movimientos.append(
                        {
                            "IBAN": account.iban,
                            "Moneda": account.currency,
                            "Fecha": entry.date.strftime("%d/%m/%Y"),
                            "Fecha Valor": entry.date_value.strftime("%d/%m/%Y"),
                            "Concepto Común": entry.concept_common,
                            "Concepto Propio": entry.concept_own,
                            "Concepto": entry.concept_text,
                            "Documento": entry.document,
                            "Referencia 1": entry.reference_1,
                            "Referencia 2": entry.reference_2,
                            "Importe": float(entry.signed_amount),
                            "Divisa Equivalente": entry.currency_eq or "",
                            "Importe Equivalente": (
                                float(entry.amount_eq) if entry.amount_eq is not None else None
                            ),
                        }
                    )

        df_cuentas = pd.DataFrame(filas_cuentas, columns=_ACCOUNT_COLUMNS)
        df_movimientos = pd.DataFrame(filas_movimientos, columns=_ENTRY_COLUMNS)

        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_cuentas.to_excel(writer, index=False, sheet_name=SHEET_ACCOUNTS)
            df_movimientos.to_excel(writer, index=False, sheet_name=SHEET_ENTRIES)

            workbook = writer.book
            ws_cuentas = writer.sheets[SHEET_ACCOUNTS]
            ws_movimientos = writer.sheets[SHEET_ENTRIES]

            # Texto para mantener ceros iniciales en códigos de cuenta
            text_format = workbook.add_format({"num_format": "@"})
            money_format = workbook.add_format({"num_format": "#,##0.00"})

            ws_cuentas.set_column("A:A", 28)  # IBAN
            ws_cuentas.set_column("B:D", 12, text_format)  # Entidad/Oficina/Cuenta
            ws_cuentas.set_column("E:E", 30)  # Titular
            ws_cuentas.set_column("F:F", 8)  # Moneda
            ws_cuentas.set_column("G:H", 12)  # Periodo
            ws_cuentas.set_column("I:J", 16, money_format)  # Saldos
            ws_cuentas.set_column("K:L", 16, money_format)  # Totales debe/haber
            ws_cuentas.set_column("M:M", 8)  # Cerrada
            ws_cuentas.set_column("N:N", 16)  # Num Movimientos
            ws_cuentas.set_column("O:O", 30)  # Archivo

            ws_movimientos.set_column("A:A", 28)  # IBAN
            ws_movimientos.set_column("B:B", 8)  # Moneda
            ws_movimientos.set_column("C:D", 12)  # Fechas
            ws_movimientos.set_column("E:F", 10, text_format)  # Conceptos
            ws_movimientos.set_column("G:G", 60)  # Concepto
            ws_movimientos.set_column("H:J", 16, text_format)  # Documento/Referencias
            ws_movimientos.set_column("K:K", 15, money_format)  # Importe
            ws_movimientos.set_column("L:L", 10)  # Divisa Equivalente
            ws_movimientos.set_column("M:M", 15, money_format)  # Importe Equivalente


_ACCOUNT_COLUMNS = [
    "IBAN",
    "Entidad",
    "Oficina",
    "Cuenta",
    "Titular",
    "Moneda",
    "Desde",
    "Hasta",
    "Saldo Inicial",
    "Saldo Final",
    "Total Debe",
    "Total Haber",
    "Cerrada",
    "Num Movimientos",
    "Archivo",
]

_ENTRY_COLUMNS = [
    "IBAN",
    "Moneda",
    "Fecha",
    "Fecha Valor",
    "Concepto Común",
    "Concepto Propio",
    "Concepto",
    "Documento",
    "Referencia 1",
    "Referencia 2",
    "Importe",
    "Divisa Equivalente",
    "Importe Equivalente",
]
