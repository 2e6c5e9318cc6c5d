"""
Modelo de dominio: Cuenta de un extracto Norma 43.

Una Account abarca desde su registro de cabecera (11) hasta su registro
final (33). Mientras está abierta, el parser le agrega los movimientos
(22) en orden de aparición; `balance_end` solo existe tras leer el 33.

El número de cuenta, el CCC y el IBAN no se guardan: se derivan de
entidad + oficina + cuenta, así no pueden quedar inconsistentes.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from norma43.domain.models.entry import Entry
from norma43.domain.models.movement_type import MovementType
from norma43.domain.shared.check_digits import ccc_to_iban, compute_ccc_check_digits

IBAN_COUNTRY = "ES"


@dataclass
class Account:
    """Cuenta bancaria con su periodo, saldos y movimientos."""

    bank: str
    """Código de entidad (4 dígitos)."""

    office: str
    """Código de oficina (4 dígitos)."""

    account: str
    """Número de cuenta (10 dígitos)."""

    date_start: date
    """Inicio del periodo del extracto."""

    date_end: date
    """Fin del periodo del extracto."""

    type: MovementType
    """Clave debe/haber del saldo inicial."""

    balance_initial: Decimal
    """Saldo inicial. Negativo cuando `type` es DEBIT."""

    currency: str
    """Divisa ISO-4217 alfabética ('EUR')."""

    mode: str
    """Modalidad de información (1, 2 o 3). No se valida."""

    owner_name: str
    """Nombre abreviado del titular, recortado."""

    entries: list[Entry] = field(default_factory=list)
    """Movimientos de la cuenta, en orden de aparición."""

    balance_end: Decimal | None = None
    """Saldo final (registro 33). None mientras no se haya leído."""

    @property
    def number(self) -> str:
        """Entidad + oficina + cuenta (18 caracteres)."""
        return f"{self.bank}{self.office}{self.account}"

    @property
    def check_digits(self) -> str:
        """Dígitos de control del CCC."""
        return compute_ccc_check_digits(self.bank, self.office, self.account)

    @property
    def ccc(self) -> str:
        """Código Cuenta Cliente completo (20 dígitos)."""
        return f"{self.bank}{self.office}{self.check_digits}{self.account}"

    @property
    def iban(self) -> str:
        """IBAN español derivado del CCC."""
        return ccc_to_iban(IBAN_COUNTRY, self.ccc)

    @property
    def is_closed(self) -> bool:
        """Indica si ya se leyó el registro final (33) de la cuenta."""
        return self.balance_end is not None

    @property
    def total_debits(self) -> Decimal:
        """Suma de los importes de los movimientos al debe."""
        return sum(
            (e.amount for e in self.entries if e.type is MovementType.DEBIT), Decimal("0")
        )

    @property
    def total_credits(self) -> Decimal:
        """Suma de los importes de los movimientos al haber."""
        return sum(
            (e.amount for e in self.entries if e.type is MovementType.CREDIT), Decimal("0")
        )
