"""Clasificación de los símbolos que llegan desde el teclado de la calculadora."""

from enum import Enum


SPECIAL_SYMBOLS = "c."
OPERATOR_SYMBOLS = "+-*/="
DIGIT_SYMBOLS = "0123456789"

CLEAR = "c"
DECIMAL_POINT = "."


class SymbolCategory(Enum):
    SPECIAL = "special"
    OPERATOR = "operator"
    DIGIT = "digit"
    UNRECOGNIZED = "unrecognized"


class Operator(Enum):
    """Operador pendiente. Se aplica cuando llega el siguiente operador."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    EQUALS = "="

    @property
    def symbol(self) -> str:
        return self.value


def classify_symbol(symbol) -> SymbolCategory:
    """Devuelve la categoría del símbolo sin efectos secundarios.

    Solo se aceptan cadenas de un carácter; cualquier otra cosa
    (cadena vacía, varias teclas juntas, tipos que no son str) es
    ``SymbolCategory.UNRECOGNIZED``.
    """
    if not isinstance(symbol, str) or len(symbol) != 1:
        return SymbolCategory.UNRECOGNIZED

    if symbol in SPECIAL_SYMBOLS:
        return SymbolCategory.SPECIAL
    if symbol in OPERATOR_SYMBOLS:
        return SymbolCategory.OPERATOR
    if symbol in DIGIT_SYMBOLS:
        return SymbolCategory.DIGIT
    return SymbolCategory.UNRECOGNIZED


def parse_operator(symbol: str) -> Operator:
    """Convierte un símbolo de operador en ``Operator``.

    Raises:
        ValueError: el símbolo no es un operador.
    """
    return Operator(symbol)
