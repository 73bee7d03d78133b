"""markup2text: TEI and XHTML documents to clean plain text."""

__version__ = "0.1.0"
