"""
Tests para N43FileExtractor.
"""

import pytest

from norma43.adapters.input.text_extractors.n43_file_extractor import N43FileExtractor
from norma43.domain.exceptions import ExtractionError, FormatoInvalidoError


@pytest.fixture
def extractor():
    return N43FileExtractor()


class TestCanHandle:
    @pytest.mark.parametrize("name", ["a.n43", "a.N43", "a.txt", "a.aeb", "a.csb", "a.q43", "a.c43"])
    def test_extensiones_soportadas(self, extractor, tmp_path, name):
        assert extractor.can_handle(tmp_path / name)

    @pytest.mark.parametrize("name", ["a.pdf", "a.xlsx", "sin_extension"])
    def test_extensiones_no_soportadas(self, extractor, tmp_path, name):
        assert not extractor.can_handle(tmp_path / name)

    def test_nombre_incluye_codificacion(self):
        assert N43FileExtractor(encoding="cp1252").name == "n43-cp1252"
        assert N43FileExtractor().encoding == "latin-1"


class TestExtract:
    def test_decodifica_latin1(self, extractor, tmp_path):
        archivo = tmp_path / "x.n43"
        archivo.write_bytes("2301CAMIÓN AÑO\r\n88\r\n".encode("latin-1"))

        assert extractor.extract(archivo) == "2301CAMIÓN AÑO\n88\n"

    def test_elimina_bom(self, tmp_path):
        archivo = tmp_path / "x.n43"
        archivo.write_bytes("\ufeff11ABC\n".encode("utf-8"))

        assert N43FileExtractor(encoding="utf-8").extract(archivo) == "11ABC\n"

    def test_archivo_inexistente(self, extractor, tmp_path):
        with pytest.raises(FormatoInvalidoError, match="no existe"):
            extractor.extract(tmp_path / "no_existe.n43")

    def test_extension_inesperada(self, extractor, tmp_path):
        archivo = tmp_path / "x.pdf"
        archivo.write_bytes(b"%PDF")
        with pytest.raises(FormatoInvalidoError, match="Extensión inesperada"):
            extractor.extract(archivo)

    def test_codificacion_desconocida(self, tmp_path):
        archivo = tmp_path / "x.n43"
        archivo.write_bytes(b"11")
        with pytest.raises(ExtractionError, match="Codificación desconocida"):
            N43FileExtractor(encoding="no-existe").extract(archivo)

    def test_bytes_invalidos(self, tmp_path):
        archivo = tmp_path / "x.n43"
        archivo.write_bytes(b"11\xff\xfe")
        with pytest.raises(ExtractionError) as exc_info:
            N43FileExtractor(encoding="utf-8").extract(archivo)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
