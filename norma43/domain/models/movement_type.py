"""
Modelo de dominio: Clave debe/haber.

Norma 43 indica el signo de saldos e importes con un dígito aparte:
'1' = debe (adeudo), '2' = haber (abono). Cualquier otro valor se
conserva como UNKNOWN en lugar de fallar.
"""

from enum import Enum


class MovementType(str, Enum):
    DEBIT = "debit"
    CREDIT = "credit"
    UNKNOWN = "unknown"

    @classmethod
    def from_code(cls, code: str) -> "MovementType":
        """Convierte la clave del fichero ('1', '2', ...) al enum.

        >>> MovementType.from_code("1")
        <MovementType.DEBIT: 'debit'>
        """
        if code == "1":
            return cls.DEBIT
        if code == "2":
            return cls.CREDIT
        return cls.UNKNOWN
