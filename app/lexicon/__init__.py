"""lexicon - key resolution engine for localized strings."""

__version__ = "0.1.0"
