"""
Adaptador de entrada: Parser de ficheros Norma 43 (Cuaderno 43 de la AEB).

LÓGICA DE PARSEO:
1. Dividir el contenido por '\\n'. Las líneas en blanco se ignoran y no
   cuentan como registros.
2. Leer el código de registro (2 primeros caracteres) y despachar al
   manejador correspondiente. Un código desconocido aborta el parseo.
3. Mantener un cursor con la cuenta abierta y el movimiento abierto:

       11 → abre cuenta (desde cualquier estado, cierra la anterior)
       22 → requiere cuenta abierta; abre movimiento
       23 → requiere movimiento abierto; agrega concepto
       24 → requiere movimiento abierto; fija la equivalencia de divisa
       33 → requiere cuenta abierta; fija saldo final y cierra la cuenta
       88 → fin de fichero; valida el número de registros y termina

4. El cursor guarda índices dentro de las listas de cuentas y movimientos,
   no referencias sueltas.

Cualquier error se lanza en el momento en que se detecta y lleva como
posición el número de registros no vacíos procesados antes de la línea
que falla (las líneas en blanco no cuentan). No hay resultado parcial:
un parseo fallido no devuelve cuentas.
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from norma43.adapters.input.n43 import records
from norma43.domain.exceptions import (
    InvalidFieldError,
    InvalidRecordTypeError,
    MissingAccountContextError,
    MissingEntryContextError,
    RecordCountMismatchError,
)
from norma43.domain.models.account import Account
from norma43.domain.models.entry import Entry
from norma43.domain.ports.statement_parser import StatementParser


@dataclass
class _ParseState:
    """Estado de un parseo en curso. Se crea uno nuevo en cada parse().

    `record_count` cuenta los registros no vacíos ya procesados; es
    también la posición que se informa en los errores.
    """

    accounts: list[Account] = field(default_factory=list)
    account_index: int | None = None
    entry_index: int | None = None
    record_count: int = 0

    def current_account(self, code: int) -> Account:
        if self.account_index is None:
            raise MissingAccountContextError(code, self.record_count)
        return self.accounts[self.account_index]

    def current_entry(self, code: int) -> Entry:
        if self.account_index is None or self.entry_index is None:
            raise MissingEntryContextError(code, self.record_count)
        return self.accounts[self.account_index].entries[self.entry_index]


# Un manejador devuelve True cuando el registro termina el fichero.
_Handler = Callable[[_ParseState, str], bool]


class N43Parser(StatementParser):
    """Parser de extractos bancarios en Norma 43.

    Una instancia se puede reutilizar: cada llamada a parse() empieza con
    un estado nuevo. `record_count` refleja el último parseo exitoso.
    """

    def __init__(self) -> None:
        self._handlers: dict[int, _Handler] = {
            records.RECORD_ACCOUNT_HEADER: self._parse_account_header,
            records.RECORD_ENTRY: self._parse_entry,
            records.RECORD_CONCEPT: self._parse_concept,
            records.RECORD_EQUIVALENCE: self._parse_equivalence,
            records.RECORD_ACCOUNT_TRAILER: self._parse_account_trailer,
            records.RECORD_FILE_TRAILER: self._parse_file_trailer,
        }
        self._record_count = 0

    @property
    def norm_name(self) -> str:
        return "N43"

    @property
    def record_count(self) -> int:
        """Registros no vacíos procesados en el último parseo (sin el 88)."""
        return self._record_count

    def parse(self, content: str) -> list[Account]:
        """Parsea un fichero Norma 43 completo."""
        state = _ParseState()

        for raw_line in content.split("\n"):
            line = raw_line.rstrip("\r")
            if not line.strip():
                continue

            code_text = line[:2]
            code = _record_code(code_text)
            handler = self._handlers.get(code)
            if handler is None:
                raise InvalidRecordTypeError(code_text, state.record_count, code)

            try:
                finished = handler(state, line)
            except InvalidFieldError as e:
                if e.line_index is not None:
                    raise
                raise InvalidFieldError(e.field, e.value, state.record_count, e.detalle) from e

            if finished:
                break
            state.record_count += 1

        self._record_count = state.record_count
        return state.accounts

    # =================================================================
    # Manejadores por tipo de registro
    # =================================================================

    def _parse_account_header(self, state: _ParseState, line: str) -> bool:
        account = records.decode_account_header(line)
        state.accounts.append(account)
        state.account_index = len(state.accounts) - 1
        state.entry_index = None
        return False

    def _parse_entry(self, state: _ParseState, line: str) -> bool:
        account = state.current_account(records.RECORD_ENTRY)
        account.entries.append(records.decode_entry(line))
        state.entry_index = len(account.entries) - 1
        return False

    def _parse_concept(self, state: _ParseState, line: str) -> bool:
        entry = state.current_entry(records.RECORD_CONCEPT)
        slot, text = records.decode_concept(line)
        entry.concepts[slot] = text
        return False

    def _parse_equivalence(self, state: _ParseState, line: str) -> bool:
        entry = state.current_entry(records.RECORD_EQUIVALENCE)
        entry.currency_eq, entry.amount_eq = records.decode_equivalence(line)
        return False

    def _parse_account_trailer(self, state: _ParseState, line: str) -> bool:
        account = state.current_account(records.RECORD_ACCOUNT_TRAILER)
        account.balance_end = records.decode_account_trailer(line)
        state.account_index = None
        state.entry_index = None
        return False

    def _parse_file_trailer(self, state: _ParseState, line: str) -> bool:
        declared = records.decode_file_trailer(line)
        if declared != state.record_count:
            raise RecordCountMismatchError(declared, state.record_count, state.record_count)
        return True


def _record_code(code_text: str) -> int | None:
    """'22' → 22. None si no son 2 dígitos ASCII."""
    if len(code_text) == 2 and code_text.isascii() and code_text.isdigit():
        return int(code_text)
    return None
