"""
Tokenizers and parsers for common formats, built on StringTokenizer.
"""

from .csv_tokenizer import CsvTokenizer, parse_csv
from .json_tokenizer import JsonKind, JsonToken, JsonTokenizer, parse_json

__all__ = [
    "CsvTokenizer",
    "JsonKind",
    "JsonToken",
    "JsonTokenizer",
    "parse_csv",
    "parse_json",
]
