"""TimeScript: lexical analysis for the TimeScript scripting language."""

__version__ = "0.1.0"
