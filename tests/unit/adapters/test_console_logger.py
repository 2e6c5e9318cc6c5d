"""
Tests para ConsoleLogger.
"""

import io
from decimal import Decimal
from pathlib import Path

from norma43.adapters.output.loggers.console_logger import ConsoleLogger


class TestConsoleLogger:
    def test_resumen_inicial(self):
        summary = ConsoleLogger(io.StringIO()).get_summary()
        assert summary["archivos_recibidos"] == 0
        assert summary["archivos_generados"] == []
        assert summary["errores"] == []

    def test_acumula_eventos(self):
        stream = io.StringIO()
        logger = ConsoleLogger(stream)
        logger.log_file_received(Path("/tmp/a.n43"), ".n43")
        logger.log_extraction_start(Path("/tmp/a.n43"), "n43-latin-1")
        logger.log_parse_complete(Path("/tmp/a.n43"), 2, 15)
        logger.log_file_received(Path("/tmp/b.pdf"), ".pdf")
        logger.log_file_skipped(Path("/tmp/b.pdf"), "Extensión no soportada")
        logger.log_file_received(Path("/tmp/c.n43"), ".n43")
        logger.log_error(Path("/tmp/c.n43"), ValueError("Línea 3: roto"))
        logger.log_output_written(Path("/tmp/movimientos_a.xlsx"))

        summary = logger.get_summary()
        assert summary["archivos_recibidos"] == 3
        assert summary["archivos_procesados"] == 1
        assert summary["archivos_descartados"] == 1
        assert summary["archivos_con_error"] == 1
        assert summary["total_cuentas"] == 2
        assert summary["total_movimientos"] == 15
        assert summary["archivos_generados"] == ["/tmp/movimientos_a.xlsx"]
        assert summary["errores"] == [{"archivo": "c.n43", "error": "Línea 3: roto"}]

        out = stream.getvalue()
        assert "n43-latin-1" in out
        assert "a.n43: 2 cuentas, 15 movimientos" in out
        assert "ValueError: Línea 3: roto" in out

    def test_stdout_por_defecto(self, capsys):
        ConsoleLogger().log_file_received(Path("x.n43"), "")
        assert "x.n43 (sin extensión)" in capsys.readouterr().out

    def test_imprime_resumen_con_errores(self):
        stream = io.StringIO()
        logger = ConsoleLogger(stream)
        logger.log_error(Path("x.n43"), RuntimeError("fallo"))

        logger.print_summary()

        out = stream.getvalue()
        assert "RESUMEN DE PROCESAMIENTO" in out
        assert "Ficheros con error:   1" in out
        assert "x.n43: fallo" in out

    def test_cuenta_con_saldo_final(self):
        stream = io.StringIO()
        ConsoleLogger(stream).log_account_read(
            Path("a.n43"), "ES9121000418450200051332", "EUR", Decimal("148765.69")
        )
        assert "ES91 2100 0418 4502 0005 1332: saldo final 148,765.69 EUR" in stream.getvalue()

    def test_cuenta_sin_registro_final(self):
        stream = io.StringIO()
        ConsoleLogger(stream).log_account_read(
            Path("a.n43"), "ES9121000418450200051332", "EUR", None
        )
        assert "ES91 2100 0418 4502 0005 1332: sin registro final" in stream.getvalue()
