"""Interactive shell — консольный интерфейс калькулятора BPR."""

from .cli import build_parser, main

__all__ = [
    "build_parser",
    "main",
]
