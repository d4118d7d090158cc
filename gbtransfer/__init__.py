"""Game Boy transfer toolkit: CPU assembler, flash save model, save data, menus and dialogue scripts."""

__version__ = "0.1.0"