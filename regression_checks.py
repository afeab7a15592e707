from calculator_engine import CalculatorEngine
from calculator_errors import ErrorKind
import sys


def _walk(symbols: str):
	engine = CalculatorEngine()
	states = []

	for symbol in symbols:
		engine.accept(symbol)
		states.append((symbol, engine.display_text))

	return engine, states


def inspect_sequence(symbols: str, *, show: int = 0) -> None:
	"""Imprime la pantalla después de cada símbolo de la secuencia."""
	engine, states = _walk(symbols)

	print("Sequence inspection")
	print(f"symbols:        {symbols}")
	print(f"total states:   {len(states)}")

	limit = len(states) if show <= 0 else show
	print("states:")
	for i, (symbol, text) in enumerate(states[:limit], start=1):
		print(f"  {i}. {symbol!r:5} -> {text}")

	print(f"final text:     {engine.display_text}")
	print(f"accumulator:    {engine.accumulator}")
	print(f"pending:        {engine.pending_operator.symbol}")
	print(f"last error:     {engine.last_error.value if engine.last_error else '-'}")


def run_regressions() -> None:
	checks: list[tuple[str, bool]] = []
	expected_actual: list[tuple[str, str, str]] = []

	for symbols, expected in (
		("5+3=", "8"),
		("4*2+1=", "9"),
		("-5=", "-5"),
		("1.5", "1.5"),
		("123", "123"),
		("1/3=", "0." + "3" * 29),
		("9/0=", "Err"),
		("1..", "Err"),
		("9/0=7", "7"),
		("5+3=2", "2"),
		("10-4=-1=", "5"),
		("12345678901234567890123456789", "12345678901234567890123456789"),
		("5" + "0" * 28 + "+1=", "5" + "0" * 27 + "1"),
		("-", "0"),
	):
		_, states = _walk(symbols)
		actual = states[-1][1]
		expected_actual.append((symbols, expected, actual))

	engine, _ = _walk("5+3=")
	before = (engine.accumulator, engine.display_text)
	engine.accept("=")
	checks.append((
		"second = is idempotent",
		(engine.accumulator, engine.display_text) == before,
	))

	engine, _ = _walk("8/0")
	engine.accept("=")
	checks.append((
		"divide by zero reports its kind",
		engine.last_error is ErrorKind.DIVIDE_BY_ZERO,
	))
	checks.append((
		"divide by zero leaves reset state",
		engine.accumulator == 0 and engine.entered_value == 0
		and engine.pending_operator.symbol == "+",
	))

	engine, _ = _walk("7*9c")
	checks.append(("clear shows 0", engine.display_text == "0"))

	engine, _ = _walk("9" * 29)
	checks.append((
		"29 nines overflow",
		engine.last_error is ErrorKind.ARITHMETIC_OVERFLOW,
	))

	engine, _ = _walk("2x")
	checks.append((
		"unknown key is rejected",
		engine.last_error is ErrorKind.UNRECOGNIZED_INPUT,
	))

	failed = [name for name, ok in checks if not ok]
	failed += [label for label, expected, actual in expected_actual if expected != actual]
	for name, ok in checks:
		print(f"{name}: {'OK' if ok else 'FAIL'}")

	print("\nExpected vs Actual:")
	for label, expected, actual in expected_actual:
		status = "OK" if expected == actual else "FAIL"
		print(f"- {label}: {status}")
		print(f"  expected: {expected}")
		print(f"  actual:   {actual}")

	if failed:
		print("\nFAILED CHECKS:")
		for name in failed:
			print(f"- {name}")
		raise SystemExit(1)

	print("\nAll regression checks passed.")


def _option(args: list[str], flag: str):
	"""Valor que sigue a ``flag`` en ``args``, o ``None`` si no aparece."""
	for i, arg in enumerate(args):
		if arg == flag:
			if i + 1 >= len(args):
				raise SystemExit(f"{flag} necesita un valor")
			return args[i + 1]
	return None


def main(argv=None) -> None:
	args = sys.argv[1:] if argv is None else list(argv)
	symbols = _option(args, "--inspect")
	if symbols is None:
		run_regressions()
		return

	show = _option(args, "--show") or "0"
	if not show.isdigit():
		raise SystemExit(f"--show espera un entero, no {show!r}")
	inspect_sequence(symbols, show=int(show))


if __name__ == "__main__":
	# python regression_checks.py                      -> todas las comprobaciones
	# python regression_checks.py --inspect "4*2+1="   -> pantalla tras cada tecla
	# python regression_checks.py --inspect "1/3=" --show 2
	main()
