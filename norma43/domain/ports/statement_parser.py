"""
Puerto de entrada: Parser de extractos bancarios.

Define el contrato que cumple el parser de cada norma soportada. Hoy solo
existe la Norma 43 (N43Parser), pero el StatementProcessor solo conoce
esta interfaz.

Recibe el contenido completo del fichero ya decodificado y con saltos de
línea normalizados, y devuelve las cuentas en orden de aparición.
"""

from abc import ABC, abstractmethod

from norma43.domain.models.account import Account


class StatementParser(ABC):
    """Interfaz para parsear el contenido de un extracto bancario."""

    @property
    @abstractmethod
    def norm_name(self) -> str:
        """Nombre de la norma que este parser maneja. Ejemplo: 'N43'."""
        ...

    @property
    @abstractmethod
    def record_count(self) -> int:
        """Registros procesados en el último parseo exitoso."""
        ...

    @abstractmethod
    def parse(self, content: str) -> list[Account]:
        """Parsea el texto y devuelve las cuentas con sus movimientos.

        Args:
            content: Contenido completo del fichero, líneas separadas por '\\n'.

        Returns:
            Lista de Account en orden de aparición.

        Raises:
            ParseError: Ante el primer registro mal formado o fuera de
                        contexto. No hay resultado parcial.
            UnknownCurrencyError: Si una divisa no está soportada.
        """
        ...
