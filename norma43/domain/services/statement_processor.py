"""
Servicio de dominio: Procesador de extractos Norma 43.

Orquesta el procesamiento de un archivo:
1. Recibe una ruta a un archivo.
2. Selecciona el TextExtractor adecuado (can_handle).
3. Lee y normaliza el texto.
4. Parsea con el StatementParser.
5. Devuelve un ParseResult.

Los errores de un archivo se registran en la bitácora y no detienen el
procesamiento de un directorio completo.
"""

from collections.abc import Sequence
from pathlib import Path

from norma43.domain.exceptions import (
    ExtractionError,
    FormatoInvalidoError,
    ParseError,
    UnknownCurrencyError,
)
from norma43.domain.models.parse_result import ParseResult
from norma43.domain.ports.process_logger import ProcessLogger
from norma43.domain.ports.statement_parser import StatementParser
from norma43.domain.ports.text_extractor import TextExtractor


class StatementProcessor:
    """Procesa un archivo y produce un ParseResult.

    Recibe sus dependencias por constructor. Solo conoce las interfaces
    (puertos), no los adaptadores concretos.
    """

    def __init__(
        self,
        text_extractors: Sequence[TextExtractor],
        parser: StatementParser,
        logger: ProcessLogger,
    ) -> None:
        """
        Args:
            text_extractors: Extractores disponibles, en orden de prioridad.
                            Se usa el primero cuyo can_handle devuelva True.
            parser: Parser de la norma (N43Parser).
            logger: Logger para la bitácora de procesamiento.
        """
        self._extractors = text_extractors
        self._parser = parser
        self._logger = logger

    def process_file(self, file_path: Path) -> ParseResult | None:
        """Procesa un archivo y devuelve el resultado.

        Returns:
            ParseResult si el procesamiento fue exitoso.
            None si el archivo fue descartado o falló la lectura o el parseo.
        """
        self._logger.log_file_received(file_path, file_path.suffix)

        extractor = self._find_extractor(file_path)
        if extractor is None:
            self._logger.log_file_skipped(
                file_path,
                f"Ningún extractor puede manejar '{file_path.suffix}'",
            )
            return None

        self._logger.log_extraction_start(file_path, extractor.name)
        try:
            content = extractor.extract(file_path)
        except (ExtractionError, FormatoInvalidoError) as e:
            self._logger.log_error(file_path, e)
            return None

        try:
            accounts = self._parser.parse(content)
        except (ParseError, UnknownCurrencyError) as e:
            self._logger.log_error(file_path, e)
            return None

        result = ParseResult(
            accounts=accounts,
            source_file=file_path.name,
            record_count=self._parser.record_count,
        )
        for account in result.accounts:
            self._logger.log_account_read(
                file_path, account.iban, account.currency, account.balance_end
            )
        self._logger.log_parse_complete(file_path, len(result.accounts), result.total_entries)
        return result

    def process_directory(self, dir_path: Path) -> list[ParseResult]:
        """Procesa todos los archivos N43 de un directorio (recursivo).

        Returns:
            Lista de ParseResult (solo los exitosos), en orden de ruta.
        """
        if not dir_path.is_dir():
            raise ValueError(f"No es un directorio: {dir_path}")

        archivos = sorted(
            p
            for p in dir_path.glob("**/*")
            if p.is_file() and self._find_extractor(p) is not None
        )

        results: list[ParseResult] = []
        for archivo in archivos:
            result = self.process_file(archivo)
            if result is not None:
                results.append(result)

        return results

    def _find_extractor(self, file_path: Path) -> TextExtractor | None:
        """Encuentra el primer extractor que pueda manejar el archivo."""
        for extractor in self._extractors:
            if extractor.can_handle(file_path):
                return extractor
        return None

