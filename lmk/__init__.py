"""lmkdir: pick or create directories by fuzzy name search."""

__version__ = "0.1.0"
