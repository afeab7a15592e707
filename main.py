"""Punto de entrada de la calculadora."""

import logging
import tkinter as tk

from calculator_engine import CalculatorEngine
from calculator_ui import CalculatorApp


WINDOW_GEOMETRY = "320x440"
LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    root = tk.Tk()
    root.geometry(WINDOW_GEOMETRY)
    CalculatorApp(root, engine=CalculatorEngine())
    root.mainloop()


if __name__ == "__main__":
    main()
