"""Кодирование Шеннона–Фано для байтовых потоков."""

from .assign import assign_codewords
from .codec import decode, decode_bits, encode, encode_bits, parse, serialize
from .errors import (
    CorruptPayloadError,
    DegenerateAlphabetError,
    FanoError,
    MalformedTableError,
    UnmatchedTrailingBitsError,
)
from .model import Symbol, SymbolTable, build_frequency_table, build_symbol_table

__version__ = "1.0.0"
