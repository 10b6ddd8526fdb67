"""Rubik's Cube models: a sticker model and a cubie index model, with turn helpers."""

__version__ = "0.1.0"