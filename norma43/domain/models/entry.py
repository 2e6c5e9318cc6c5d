"""
Modelo de dominio: Movimiento de una cuenta (registro 22).

Un Entry se crea al decodificar su registro principal (22) y se completa
con los registros complementarios que le siguen:
- 23: conceptos de texto libre, indexados por código de slot ('01'..'05').
- 24: importe equivalente en otra divisa.

A diferencia del saldo inicial de la cuenta, el importe NO cambia de signo
según la clave debe/haber: `type` es solo informativo.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from norma43.domain.models.movement_type import MovementType


@dataclass
class Entry:
    """Movimiento individual de un extracto Norma 43."""

    office: str
    """Oficina de origen, sin ceros a la izquierda."""

    date: date
    """Fecha de la operación."""

    date_raw: str
    """Fecha de la operación tal como aparece en el fichero (AAMMDD)."""

    date_value: date
    """Fecha valor."""

    concept_common: str
    """Concepto común interbancario (2 dígitos)."""

    concept_own: str
    """Concepto propio de la entidad (3 dígitos)."""

    type: MovementType
    """Clave debe/haber del movimiento."""

    amount: Decimal
    """Importe, siempre positivo tal como viene en el fichero."""

    document: str
    """Número de documento, sin ceros a la izquierda."""

    reference_1: str
    """Referencia 1, sin ceros a la izquierda."""

    reference_2: str
    """Referencia 2, recortada."""

    raw: str
    """Línea original completa del registro 22."""

    concepts: dict[str, str] = field(default_factory=dict)
    """Conceptos complementarios (registro 23): slot → texto recortado."""

    currency_eq: str | None = None
    """Divisa del importe equivalente (registro 24). None si no hay 24."""

    amount_eq: Decimal | None = None
    """Importe equivalente (registro 24). None si no hay 24."""

    @property
    def signed_amount(self) -> Decimal:
        """Importe con signo: negativo si es un adeudo."""
        if self.type is MovementType.DEBIT:
            return -self.amount
        return self.amount

    @property
    def concept_text(self) -> str:
        """Conceptos complementarios unidos en orden de slot."""
        return " ".join(text for _, text in sorted(self.concepts.items()) if text)
