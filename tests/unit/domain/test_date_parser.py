"""
Tests para norma43.domain.shared.date_parser

Las fechas N43 son siempre AAMMDD (6 dígitos, año de 2 dígitos).
"""

from datetime import date

import pytest

from norma43.domain.shared.date_parser import parse_n43_date


class TestParseN43Date:
    def test_fecha_basica(self):
        assert parse_n43_date("240105") == date(2024, 1, 5)

    def test_fin_de_anio(self):
        assert parse_n43_date("231231") == date(2023, 12, 31)

    def test_bisiesto(self):
        assert parse_n43_date("240229") == date(2024, 2, 29)

    def test_espacios_alrededor(self):
        assert parse_n43_date(" 240105 ") == date(2024, 1, 5)

    # --- Ventana de años ---

    def test_anio_49_es_2049(self):
        assert parse_n43_date("490101") == date(2049, 1, 1)

    def test_anio_50_es_1950(self):
        assert parse_n43_date("500101") == date(1950, 1, 1)

    def test_anio_99_es_1999(self):
        assert parse_n43_date("991231") == date(1999, 12, 31)

    # --- Errores ---

    def test_vacio_lanza_error(self):
        with pytest.raises(ValueError, match="vacío"):
            parse_n43_date("")

    @pytest.mark.parametrize("text", ["24015", "2401055", "24-1-5", "AABBCC"])
    def test_formato_no_reconocido(self, text):
        with pytest.raises(ValueError, match="no reconocido"):
            parse_n43_date(text)

    @pytest.mark.parametrize("text", ["230229", "241301", "240100", "240431"])
    def test_fecha_inexistente(self, text):
        with pytest.raises(ValueError, match="Fecha inválida"):
            parse_n43_date(text)
