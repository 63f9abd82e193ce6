"""Nelder-Mead minimisation of functions written as text expressions.

Modules: point (vectors and simplex measures), algebra, tokenizer, postfix
and function (expression parsing and evaluation), solver (the optimiser)
and cli (the command line).
"""

__version__ = "0.1.0"

__all__ = ["algebra", "cli", "function", "point", "postfix", "solver", "tokenizer"]