"""
Tests para los decodificadores de registros N43 (una línea cada uno).
"""

from decimal import Decimal

import pytest

from norma43.adapters.input.n43 import records
from norma43.domain.exceptions import InvalidFieldError, UnknownCurrencyError


class TestCabeceraDeCuenta:
    def test_campos_de_texto(self, n43):
        account = records.decode_account_header(n43.account(owner="  TITULAR CON ESPACIOS"))
        assert account.owner_name == "TITULAR CON ESPACIOS"
        assert account.entries == []
        assert account.balance_end is None

    def test_divisa_gbp(self, n43):
        assert records.decode_account_header(n43.account(currency="426")).currency == "GBP"

    def test_entidad_no_numerica(self, n43):
        with pytest.raises(InvalidFieldError) as exc_info:
            records.decode_account_header(n43.account(bank="21A0"))
        assert exc_info.value.field == "bank"
        assert exc_info.value.line_index is None

    @pytest.mark.parametrize(
        "length, field",
        [(15, "account"), (24, "date_start"), (40, "balance_initial"), (48, "currency")],
    )
    def test_linea_truncada_informa_la_primera_columna(self, n43, length, field):
        with pytest.raises(InvalidFieldError) as exc_info:
            records.decode_account_header(n43.account()[:length])
        assert exc_info.value.field == field

    def test_varias_columnas_invalidas(self, n43):
        line = n43.account(date_start="AAAAAA", balance="XXXXXXXXXXXX")
        with pytest.raises(InvalidFieldError) as exc_info:
            records.decode_account_header(line)
        assert exc_info.value.field == "date_start"


class TestMovimiento:
    def test_ceros_a_la_izquierda(self, n43):
        entry = records.decode_entry(
            n43.entry(office="0007", document="0000000000", reference_1="000000000100")
        )
        assert entry.office == "7"
        assert entry.document == ""
        assert entry.reference_1 == "100"

    def test_conceptos_sin_recortar(self, n43):
        entry = records.decode_entry(n43.entry(concept_common="99", concept_own="001"))
        assert entry.concept_common == "99"
        assert entry.concept_own == "001"

    def test_fecha_valor_invalida(self, n43):
        with pytest.raises(InvalidFieldError) as exc_info:
            records.decode_entry(n43.entry(date_value="      "))
        assert exc_info.value.field == "date_value"


class TestRegistrosCortos:
    def test_concepto(self):
        assert records.decode_concept("2305" + "TEXTO LIBRE".ljust(76)) == ("05", "TEXTO LIBRE")

    def test_equivalencia(self, n43):
        currency, amount = records.decode_equivalence(n43.equivalence("392", "000000120000", "00"))
        assert currency == "JPY"
        assert amount == Decimal("120000.00")

    def test_equivalencia_divisa_desconocida(self, n43):
        with pytest.raises(UnknownCurrencyError):
            records.decode_equivalence(n43.equivalence("123"))

    def test_final_de_cuenta(self, n43):
        balance = records.decode_account_trailer(n43.account_trailer(balance="000000000010", cents="05"))
        assert balance == Decimal("10.05")

    def test_final_de_fichero(self, n43):
        assert records.decode_file_trailer(n43.file_trailer(123)) == 123
