"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.
Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from norma43.domain.ports import TextExtractor, StatementParser, OutputWriter
"""

from norma43.domain.ports.output_writer import OutputWriter
from norma43.domain.ports.process_logger import ProcessLogger
from norma43.domain.ports.statement_parser import StatementParser
from norma43.domain.ports.text_extractor import TextExtractor

__all__ = [
    "OutputWriter",
    "ProcessLogger",
    "StatementParser",
    "TextExtractor",
]
