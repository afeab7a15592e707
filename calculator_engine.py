"""
Motor de la calculadora de cuatro operaciones.

Este módulo provee la clase CalculatorEngine, una máquina de estados
que recibe los símbolos de los botones uno a uno y mantiene el cálculo
en curso. Los operadores se evalúan con un paso de retraso: cada
operador aplica el que estaba pendiente y queda él mismo pendiente
hasta el siguiente operador o '='. No hay precedencia.

Contrato de interfaz:
    - accept(symbol: str) -> None
    - display_text: propiedad de solo lectura
    - on_display_change: callable opcional, recibe el nuevo texto
"""

import logging
import operator
from decimal import (
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero as DecimalDivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)

from calculator_errors import (
    ArithmeticOverflow,
    CalculatorError,
    DivideByZero,
    RepeatedDecimalPoint,
    UnrecognizedInput,
)
from symbol_classifier import (
    CLEAR,
    Operator,
    SymbolCategory,
    classify_symbol,
    parse_operator,
)


logger = logging.getLogger(__name__)

ERROR_MARKER = "Err"
# 29 dígitos: todo entero dentro del rango de 96 bits es exacto
DEFAULT_PRECISION = 29
# Rango del decimal de 96 bits: 2**96 - 1
DEFAULT_MAX_MAGNITUDE = Decimal("79228162514264337593543950335")

_ZERO = Decimal(0)

# Origen del texto en pantalla
_SHOW_ENTRY = "entry"
_SHOW_ACCUMULATOR = "accumulator"
_SHOW_ERROR = "error"
_SHOW_UNCHANGED = "unchanged"

_BINARY_OPERATIONS = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: operator.truediv,
}


class CalculatorEngine:
    """Interpreta los símbolos del teclado y acumula el resultado."""

    def __init__(
        self,
        error_marker: str = ERROR_MARKER,
        precision: int = DEFAULT_PRECISION,
        max_magnitude=DEFAULT_MAX_MAGNITUDE,
        on_display_change=None,
    ):
        self.error_marker = error_marker
        self.on_display_change = on_display_change
        self._context = Context(
            prec=precision,
            rounding=ROUND_HALF_EVEN,
            traps=[Overflow, InvalidOperation, DecimalDivisionByZero],
        )
        self._max_magnitude = Decimal(max_magnitude)
        self._last_error = None
        self._reset_state()
        self._display_text = self._render()

    # ── Estado observable ────────────────────────────────────────

    @property
    def display_text(self) -> str:
        return self._display_text

    @property
    def last_error(self):
        """``ErrorKind`` de la última llamada a ``accept``, o ``None``."""
        return self._last_error

    @property
    def accumulator(self) -> Decimal:
        return self._accumulator

    @property
    def entered_value(self) -> Decimal:
        return self._entered_value

    @property
    def is_negative(self) -> bool:
        return self._is_negative

    @property
    def fraction_digits(self) -> int:
        return self._fraction_digits

    @property
    def pending_operator(self) -> Operator:
        return self._pending_operator

    # ── Entrada principal ────────────────────────────────────────

    def accept(self, symbol: str) -> None:
        """Procesa un símbolo y actualiza la pantalla.

        Nunca lanza errores de la calculadora: cualquier ``CalculatorError``
        reinicia el estado y deja el marcador de error en pantalla.
        """
        self._last_error = None
        try:
            category = classify_symbol(symbol)
            if category is SymbolCategory.SPECIAL:
                self._input_special(symbol)
            elif category is SymbolCategory.OPERATOR:
                self._input_operator(parse_operator(symbol))
            elif category is SymbolCategory.DIGIT:
                self._input_digit(symbol)
            else:
                raise UnrecognizedInput(f"símbolo desconocido: {symbol!r}")
        except CalculatorError as exc:
            self._error(exc)
        self.refresh_display()

    def accept_all(self, symbols) -> str:
        """Envía cada símbolo de ``symbols`` y devuelve el texto final."""
        for symbol in symbols:
            self.accept(symbol)
        return self._display_text

    def reset(self) -> None:
        self._last_error = None
        self._reset_state()
        self.refresh_display()

    def refresh_display(self) -> str:
        """Recalcula el texto y avisa al observador si ha cambiado."""
        text = self._render()
        if text != self._display_text:
            self._display_text = text
            if self.on_display_change is not None:
                self.on_display_change(text)
        return text

    # ── Manejadores por categoría ────────────────────────────────

    def _reset_state(self):
        self._accumulator = _ZERO
        self._entered_value = _ZERO
        self._is_negative = False
        self._fraction_digits = 0
        self._pending_operator = Operator.ADD
        self._display_source = _SHOW_ENTRY
        logger.debug("Estado reiniciado")

    def _input_special(self, symbol: str):
        if symbol == CLEAR:
            self._reset_state()
            return

        # '.': pasa a modo fraccionario
        if self._fraction_digits != 0:
            raise RepeatedDecimalPoint("segundo punto decimal")
        self._fraction_digits = 1

    def _input_digit(self, symbol: str):
        # Un dígito justo después de '=' empieza un cálculo nuevo
        if self._pending_operator is Operator.EQUALS:
            self._reset_state()

        digit = Decimal(symbol)
        if self._fraction_digits == 0:
            self._entered_value = self._arithmetic(
                lambda value, d: value * 10 + d, self._entered_value, digit
            )
        else:
            places = self._fraction_digits
            self._entered_value = self._arithmetic(
                lambda value, d: value + d.scaleb(-places),
                self._entered_value,
                digit,
            )
            self._fraction_digits += 1
        self._display_source = _SHOW_ENTRY

    def _input_operator(self, new_operator: Operator):
        # Sin dígitos en el término y fuera de un resultado de '=':
        # el '-' es el signo del número que viene, no una resta.
        if (
            self._entered_value.is_zero()
            and new_operator is Operator.SUBTRACT
            and self._pending_operator is not Operator.EQUALS
        ):
            self._is_negative = True
            # La pantalla no cambia hasta el primer dígito
            self._display_source = _SHOW_UNCHANGED
            return

        signed = self._entered_value
        if self._is_negative:
            signed = signed.copy_negate()

        self._accumulator = self._apply_pending(signed)
        logger.debug(
            "Aplicado %s %s -> %s",
            self._pending_operator.symbol,
            signed,
            self._accumulator,
        )

        self._entered_value = _ZERO
        self._pending_operator = new_operator
        self._is_negative = False
        self._fraction_digits = 0
        self._display_source = _SHOW_ACCUMULATOR

    def _apply_pending(self, operand: Decimal) -> Decimal:
        pending = self._pending_operator
        if pending is Operator.EQUALS:
            return self._accumulator
        if pending is Operator.DIVIDE and operand.is_zero():
            raise DivideByZero("división entre cero")
        return self._arithmetic(
            _BINARY_OPERATIONS[pending], self._accumulator, operand
        )

    def _error(self, exc: CalculatorError):
        logger.warning("[Error] %s: %s", exc.kind.value, exc.reason)
        self._reset_state()
        self._last_error = exc.kind
        self._display_source = _SHOW_ERROR

    # ── Aritmética con rango acotado ─────────────────────────────

    def _arithmetic(self, operation, left: Decimal, right: Decimal) -> Decimal:
        with localcontext(self._context):
            try:
                result = operation(left, right)
            except Overflow as exc:
                raise ArithmeticOverflow("resultado fuera de rango") from exc

        if result.copy_abs() > self._max_magnitude:
            raise ArithmeticOverflow(f"{result} excede el rango decimal")
        return result

    # ── Formato de pantalla ──────────────────────────────────────

    def _render(self) -> str:
        if self._display_source == _SHOW_UNCHANGED:
            return self._display_text
        if self._display_source == _SHOW_ERROR:
            return self.error_marker
        if self._display_source == _SHOW_ACCUMULATOR:
            return self._format_value(self._accumulator)
        sign = "-" if self._is_negative else ""
        return sign + self._format_value(self._entered_value)

    @staticmethod
    def _format_value(value: Decimal) -> str:
        if value.is_zero():
            value = value.copy_abs()
        return format(value, "f")
