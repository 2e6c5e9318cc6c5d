"""
Modelo de dominio: Resultado completo del parseo de un fichero Norma 43.

Es el objeto que fluye entre los adaptadores:
- Lo PRODUCE el StatementProcessor a partir de la lista de cuentas del parser.
- Lo CONSUME el OutputWriter (Excel).
- Lo REGISTRA el ProcessLogger.
"""

from dataclasses import dataclass

from norma43.domain.models.account import Account


@dataclass(frozen=True)
class ParseResult:
    """Resultado del parseo de un fichero."""

    accounts: list[Account]
    """Cuentas en orden de aparición, cada una con sus movimientos."""

    source_file: str
    """Nombre del archivo original. Para trazabilidad en la bitácora."""

    record_count: int
    """Registros no vacíos procesados antes del registro final (88)."""

    @property
    def total_entries(self) -> int:
        """Número total de movimientos en todas las cuentas."""
        return sum(len(account.entries) for account in self.accounts)
