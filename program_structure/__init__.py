"""Syntax tree, diagnostics, program archive and utility structures for a circuit compiler front end."""

__version__ = "0.1.0"