"""Conversion steps over files and directories."""

from .convert import (
    convert_directory,
    convert_file,
    convert_tree,
    extract_text,
    parse_conversion,
    tokens_for_document,
)
from .split import TeiSplit, split_file, split_tei

__all__ = [
    "TeiSplit",
    "convert_directory",
    "convert_file",
    "convert_tree",
    "extract_text",
    "parse_conversion",
    "split_file",
    "split_tei",
    "tokens_for_document",
]
