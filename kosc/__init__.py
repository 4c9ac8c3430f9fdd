"""
kosc - translate while/for scripts into an UNTIL-loop control dialect.

Example:
    >>> from kosc import translate
    >>> print(translate("var x = 5;"))
    DECLARE x TO 5.
"""

from .core.errors import KoscError, ParseError
from .translator import parse, render, translate

__version__ = "0.1.0"

__all__ = [
    "parse",
    "render",
    "translate",
    "KoscError",
    "ParseError",
]
