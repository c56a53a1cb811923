"""
Command Grammar - Parse abbreviated player commands for turn-based games.

This package provides tools for:
- Declaring command grammars from composable parser nodes
- Parsing typed input with prefix abbreviations and ranked error messages
- Trying grammars out from the command line
"""

__version__ = "0.1.0"
