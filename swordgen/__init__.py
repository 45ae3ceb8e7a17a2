"""Wordlist generator that writes every concatenation of a set of words up to a given depth."""

__version__ = "0.2.7"
__all__ = ["__version__"]