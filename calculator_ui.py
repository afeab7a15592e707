"""
Interfaz gráfica de la calculadora de cuatro operaciones.

Usa tkinter. Solo traduce botones y teclas a símbolos para el motor
y pinta el texto que el motor publica; toda la lógica vive en
CalculatorEngine.
"""

import logging
import tkinter as tk
from tkinter import font as tkfont

from calculator_engine import CalculatorEngine


logger = logging.getLogger(__name__)


# ═════════════════════════════════════════════════════════════════
#  Aplicación principal
# ═════════════════════════════════════════════════════════════════

class CalculatorApp:
    """Ventana principal de la calculadora."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":         "#1E1E2E",
        "display_bg": "#181825",
        "num":        "#313244",
        "num_fg":     "#CDD6F4",
        "op":         "#F38BA8",
        "op_fg":      "#1E1E2E",
        "special":    "#585B70",
        "special_fg": "#CDD6F4",
        "equals":     "#89B4FA",
        "equals_fg":  "#1E1E2E",
        "result_fg":  "#A6E3A1",
        "error_fg":   "#F38BA8",
    }

    # ── Definiciones del teclado ─────────────────────────────────
    #  Cada fila es una lista de (texto, símbolo, tipo_color)
    #  tipo_color: "num", "op", "special", "equals"

    KEYPAD = [
        [("C",  "c", "special"), ("÷", "/", "op")],

        [("7",  "7", "num"), ("8", "8", "num"),
         ("9",  "9", "num"), ("×", "*", "op")],

        [("4",  "4", "num"), ("5", "5", "num"),
         ("6",  "6", "num"), ("−", "-", "op")],

        [("1",  "1", "num"), ("2", "2", "num"),
         ("3",  "3", "num"), ("+", "+", "op")],

        [("0",  "0", "num"), (".", ".", "num"),
         ("=",  "=", "equals")],
    ]

    # ── Teclas con nombre que no producen el carácter del símbolo ─
    KEY_BINDINGS = {
        "Return":      "=",
        "KP_Enter":    "=",
        "Escape":      "c",
        "KP_Add":      "+",
        "KP_Subtract": "-",
        "KP_Multiply": "*",
        "KP_Divide":   "/",
        "KP_Decimal":  ".",
    }

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, engine=None):
        self.root = root
        self.root.title("Calculadora")
        self.root.configure(bg=self.C["bg"])
        self.root.resizable(False, False)

        self.engine = engine if engine is not None else CalculatorEngine()

        self._init_fonts()
        self._create_display()
        self._create_keypad()
        self._bind_keyboard()

        self.engine.on_display_change = self._show
        self._show(self.engine.display_text)

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_result = tkfont.Font(family="Consolas", size=22, weight="bold")
        self._f_btn    = tkfont.Font(family="Segoe UI", size=15)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["display_bg"], padx=12, pady=8)
        frame.pack(fill="x", padx=6, pady=(6, 2))

        self.display_var = tk.StringVar(value="0")
        self.display_label = tk.Label(
            frame, textvariable=self.display_var,
            font=self._f_result, bg=self.C["display_bg"],
            fg=self.C["result_fg"], anchor="e",
        )
        self.display_label.pack(fill="x", pady=(4, 4))

    # ── Teclado numérico / operadores ────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", expand=True, padx=6, pady=(2, 6))

        max_cols = max(len(row) for row in self.KEYPAD)
        for c in range(max_cols):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            spans = self._compute_spans(len(row_def), max_cols)
            col_pos = 0
            for idx, (text, symbol, kind) in enumerate(row_def):
                btn = tk.Button(
                    frame, text=text, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["special"],
                    relief="flat",
                    command=lambda s=symbol: self.press(s),
                )
                btn.grid(row=r, column=col_pos, columnspan=spans[idx],
                         sticky="nsew", padx=2, pady=2, ipady=8)
                col_pos += spans[idx]

        for r in range(len(self.KEYPAD)):
            frame.rowconfigure(r, weight=1)

    @staticmethod
    def _compute_spans(cols_in_row: int, max_cols: int) -> list[int]:
        """Reparte max_cols entre cols_in_row botones."""
        base, extra = divmod(max_cols, cols_in_row)
        spans = [base] * cols_in_row
        # Las columnas sobrantes van al último botón (generalmente '=')
        spans[-1] += extra
        return spans

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        self.root.bind("<Key>", self._on_key)

    @classmethod
    def symbol_for_key(cls, char: str, keysym: str):
        """Traduce un evento de teclado a símbolo, o ``None`` si se ignora."""
        if keysym in cls.KEY_BINDINGS:
            return cls.KEY_BINDINGS[keysym]
        if char and char.lower() in "0123456789.+-*/=c":
            return char.lower()
        return None

    def _on_key(self, event):
        symbol = self.symbol_for_key(event.char, event.keysym)
        if symbol is None:
            return None
        self.press(symbol)
        return "break"

    # ── Acciones ─────────────────────────────────────────────────

    def press(self, symbol: str):
        logger.debug("Tecla %r", symbol)
        self.engine.accept(symbol)
        # El texto puede no cambiar (p. ej. el marcador de error repetido)
        self._paint()

    def _show(self, text: str):
        self.display_var.set(text)
        self._paint()

    def _paint(self):
        is_error = self.display_var.get() == self.engine.error_marker
        fg = self.C["error_fg"] if is_error else self.C["result_fg"]
        self.display_label.config(fg=fg)
