"""
Fixtures compartidas: constructores de líneas Norma 43 de 80 caracteres.

Cada método arma un registro con f-strings de ancho fijo, así los tests
no dependen de contar columnas a mano.
"""

import pytest


class N43Lines:
    """Constructores de registros Norma 43 con valores por defecto válidos."""

    @staticmethod
    def account(
        bank: str = "2100",
        office: str = "0418",
        account: str = "0200051332",
        date_start: str = "240101",
        date_end: str = "240131",
        type_code: str = "2",
        balance: str = "000000150000",
        cents: str = "25",
        currency: str = "978",
        mode: str = "3",
        owner: str = "EMPRESA DE PRUEBA SL",
    ) -> str:
        line = (
            f"11{bank}{office}{account}{date_start}{date_end}{type_code}"
            f"{balance}{cents}{currency}{mode}{owner:<26}   "
        )
        assert len(line) == 80
        return line

    @staticmethod
    def entry(
        office: str = "0418",
        date: str = "240105",
        date_value: str = "240106",
        concept_common: str = "02",
        concept_own: str = "015",
        type_code: str = "1",
        amount: str = "000000001234",
        cents: str = "56",
        document: str = "0000012345",
        reference_1: str = "000000098765",
        reference_2: str = "REF2 PRUEBA",
    ) -> str:
        line = (
            f"22    {office}{date}{date_value}{concept_common}{concept_own}{type_code}"
            f"{amount}{cents}{document}{reference_1}{reference_2:<16}"
        )
        assert len(line) == 80
        return line

    @staticmethod
    def concept(slot: str = "01", text: str = "RECIBO LUZ ENERO") -> str:
        return f"23{slot}{text:<76}"

    @staticmethod
    def equivalence(currency: str = "840", amount: str = "000000001500", cents: str = "00") -> str:
        line = f"2401{currency}{amount}{cents}".ljust(80)
        assert len(line) == 80
        return line

    @staticmethod
    def account_trailer(
        bank: str = "2100",
        office: str = "0418",
        account: str = "0200051332",
        num_debits: str = "00001",
        total_debits: str = "00000000123456",
        num_credits: str = "00000",
        total_credits: str = "00000000000000",
        balance_key: str = "2",
        balance: str = "000000148765",
        cents: str = "69",
        currency: str = "978",
    ) -> str:
        line = (
            f"33{bank}{office}{account}{num_debits}{total_debits}{num_credits}"
            f"{total_credits}{balance_key}{balance}{cents}{currency}    "
        )
        assert len(line) == 80
        return line

    @staticmethod
    def file_trailer(record_count: int) -> str:
        line = f"88{'9' * 18}{record_count:06d}".ljust(80)
        assert len(line) == 80
        return line

    @classmethod
    def minimal_file(cls) -> str:
        """11, 22, 23, 33 y 88 con el conteo correcto (4 registros)."""
        lines = [
            cls.account(),
            cls.entry(),
            cls.concept(),
            cls.account_trailer(),
            cls.file_trailer(4),
        ]
        return "\n".join(lines) + "\n"


@pytest.fixture
def n43() -> type[N43Lines]:
    """Acceso a los constructores de líneas N43."""
    return N43Lines


@pytest.fixture
def minimal_content() -> str:
    """Fichero N43 mínimo válido."""
    return N43Lines.minimal_file()
