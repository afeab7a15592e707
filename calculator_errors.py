"""Errores del motor de la calculadora.

Ninguno sale de ``CalculatorEngine.accept``: el motor los captura,
vuelve al estado inicial y muestra el marcador de error.
"""

from enum import Enum


class ErrorKind(Enum):
    UNRECOGNIZED_INPUT = "unrecognized input"
    REPEATED_DECIMAL_POINT = "repeated decimal point"
    DIVIDE_BY_ZERO = "divide by zero"
    ARITHMETIC_OVERFLOW = "arithmetic overflow"


class CalculatorError(Exception):
    """Base de los errores que disparan la ruta de error del motor."""

    kind: ErrorKind

    def __init__(self, reason: str = ""):
        super().__init__(reason or self.kind.value)
        self.reason = reason or self.kind.value


class UnrecognizedInput(CalculatorError):
    kind = ErrorKind.UNRECOGNIZED_INPUT


class RepeatedDecimalPoint(CalculatorError):
    kind = ErrorKind.REPEATED_DECIMAL_POINT


class DivideByZero(CalculatorError):
    kind = ErrorKind.DIVIDE_BY_ZERO


class ArithmeticOverflow(CalculatorError):
    kind = ErrorKind.ARITHMETIC_OVERFLOW
