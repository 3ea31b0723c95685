#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import sys
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.resolve()

# Make project modules importable
sys.path.insert(0, str(PROJECT_ROOT))

from core.config_loader import load_config
from scanner.errors import StreamExhausted
from scanner.reader import ValidatedReader


def main():
    config = load_config()
    reader = ValidatedReader.from_config(sys.stdin, config)

    print("Validated input demo")
    print("Ctrl-D to quit.")
    print("─────────────────────────────────\n")

    try:
        i = reader.read_int_in_range("Enter an integer: ", 0, 100)
        s = reader.read_line("Enter a string: ")
        print(f"You entered: {i} and {s}\n\n")

        # Same source, Spanish messages
        reader = ValidatedReader.from_config(sys.stdin, config.model_copy(update={"locale": "es"}))
        i = reader.read_int_in_range("Introduce un entero: ", 0, 100)
        s = reader.read_line("Introduce una cadena: ")
        print(f"Has introducido: {i} y {s}")
    except (StreamExhausted, KeyboardInterrupt):
        print("\nGoodbye!")
    finally:
        reader.close()


if __name__ == "__main__":
    main()
