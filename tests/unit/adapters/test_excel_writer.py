"""
Tests para ExcelWriter.

Se relee el Excel generado con pandas (motor openpyxl) para comprobar
hojas, columnas y valores.
"""

import pandas as pd
import pytest

from norma43.adapters.input.n43.parser import N43Parser
from norma43.adapters.output.writers.excel_writer import (
    SHEET_ACCOUNTS,
    SHEET_ENTRIES,
    ExcelWriter,
)
from norma43.domain.exceptions import OutputError
from norma43.domain.models import ParseResult

pytest.importorskip("openpyxl")


def _result(content: str, source_file: str = "extracto.n43") -> ParseResult:
    parser = N43Parser()
    accounts = parser.parse(content)
    return ParseResult(accounts=accounts, source_file=source_file, record_count=parser.record_count)


def _read(path, sheet):
    return pd.read_excel(path, sheet_name=sheet, dtype=str, engine="openpyxl")


class TestWriteSingle:
    def test_hojas_y_valores(self, tmp_path, minimal_content):
        path = ExcelWriter().write_single(_result(minimal_content), tmp_path / "salida.xlsx")

        cuentas = _read(path, SHEET_ACCOUNTS)
        assert len(cuentas) == 1
        fila = cuentas.iloc[0]
        assert fila["IBAN"] == "ES9121000418450200051332"
        assert fila["Oficina"] == "0418"
        assert fila["Moneda"] == "EUR"
        assert fila["Desde"] == "01/01/2024"
        assert float(fila["Saldo Inicial"]) == pytest.approx(150000.25)
        assert float(fila["Saldo Final"]) == pytest.approx(148765.69)
        assert float(fila["Total Debe"]) == pytest.approx(1234.56)
        assert float(fila["Total Haber"]) == pytest.approx(0)
        assert fila["Cerrada"] == "Sí"
        assert fila["Archivo"] == "extracto.n43"

        movimientos = _read(path, SHEET_ENTRIES)
        assert len(movimientos) == 1
        mov = movimientos.iloc[0]
        assert mov["Concepto"] == "RECIBO LUZ ENERO"
        assert mov["Documento"] == "12345"
        assert float(mov["Importe"]) == pytest.approx(-1234.56)

    def test_agrega_extension(self, tmp_path, minimal_content):
        path = ExcelWriter().write_single(_result(minimal_content), tmp_path / "sub" / "salida")
        assert path.suffix == ".xlsx"
        assert path.exists()

    def test_cuenta_sin_movimientos(self, tmp_path, n43):
        content = "\n".join([n43.account(), n43.file_trailer(1)])
        path = ExcelWriter().write_single(_result(content), tmp_path / "vacia.xlsx")

        cuentas = _read(path, SHEET_ACCOUNTS)
        assert len(cuentas) == 1
        assert cuentas.iloc[0]["Cerrada"] == "No"
        movimientos = _read(path, SHEET_ENTRIES)
        assert movimientos.empty
        assert "Importe" in movimientos.columns


class TestWriteConsolidated:
    def test_une_varios_resultados(self, tmp_path, minimal_content):
        results = [_result(minimal_content, "a.n43"), _result(minimal_content, "b.n43")]
        path = ExcelWriter().write_consolidated(results, tmp_path / "consolidado.xlsx")

        cuentas = _read(path, SHEET_ACCOUNTS)
        assert list(cuentas["Archivo"]) == ["a.n43", "b.n43"]
        assert len(_read(path, SHEET_ENTRIES)) == 2

    def test_sin_resultados(self, tmp_path):
        with pytest.raises(OutputError, match="No hay resultados"):
            ExcelWriter().write_consolidated([], tmp_path / "consolidado.xlsx")

    def test_error_de_escritura(self, tmp_path, minimal_content):
        destino = tmp_path / "ocupado.xlsx"
        destino.mkdir()
        with pytest.raises(OutputError):
            ExcelWriter().write_single(_result(minimal_content), destino)
