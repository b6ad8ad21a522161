"""Кодирование и декодирование в текстовый формат Шеннона–Фано.

Формат закодированного файла::

    <число символов>NL
    <байт>\\t<вероятность>\\t<кодовое слово>NL   (для каждого символа таблицы)
    NL
    <биты '0'/'1'>

Байт символа записывается как есть, поэтому разбор идёт по байтам.
"""

import logging
import os

from .assign import assign_codewords
from .errors import CorruptPayloadError, MalformedTableError, UnmatchedTrailingBitsError
from .model import Symbol, SymbolTable, build_frequency_table, build_symbol_table
from .tree import build_code_tree

log = logging.getLogger(__name__)

PROBABILITY_FORMAT = "%f"
MAX_SYMBOLS = 256


class EncodeResult:
    __slots__ = ("table", "codes", "bits", "data")

    def __init__(self, table, codes, bits, data):
        self.table = table  # Упорядоченная таблица символов
        self.codes = codes  # {символ: кодовое слово}
        self.bits = bits  # Закодированный текст из '0'/'1'
        self.data = data  # Сериализованный результат (bytes)


class DecodeResult:
    __slots__ = ("table", "codes", "bits", "data")

    def __init__(self, table, codes, bits, data):
        self.table = table
        self.codes = codes
        self.bits = bits
        self.data = data  # Восстановленные байты


# -------------------- Кодирование --------------------
def encode_bits(data, codes):
    return ''.join(codes[byte] for byte in data)


def serialize(table, codes, bits, newline=os.linesep):
    nl = newline.encode('ascii')
    out = bytearray(b"%d" % len(table) + nl)
    for symbol in table:
        out.append(symbol.value)
        out += b"\t" + (PROBABILITY_FORMAT % symbol.probability).encode('ascii')
        out += b"\t" + codes[symbol.value].encode('ascii') + nl
    out += nl
    out += bits.encode('ascii')
    return bytes(out)


def encode(data, newline=os.linesep):
    frequency, total = build_frequency_table(data)
    table = build_symbol_table(frequency, total)
    if len(table) == 0:
        log.info("Encode: empty input")
        codes = {}
    else:
        codes = assign_codewords(table)
    bits = encode_bits(data, codes)
    log.info("Encode: %d symbols, %d bytes -> %d bits", len(table), total, len(bits))
    return EncodeResult(table, codes, bits, serialize(table, codes, bits, newline))


# -------------------- Декодирование --------------------
def _read_line(blob, pos):
    end = blob.find(b"\n", pos)
    if end < 0:
        raise MalformedTableError(f"Нет конца строки после позиции {pos}.")
    line = blob[pos:end]
    if line.endswith(b"\r"):
        line = line[:-1]
    return line, end + 1


def _parse_count(line):
    try:
        count = int(line.decode('ascii'))
    except (UnicodeDecodeError, ValueError):
        raise MalformedTableError(f"Некорректный заголовок таблицы: {line!r}.") from None
    if not 0 <= count <= MAX_SYMBOLS:
        raise MalformedTableError(f"Недопустимое число символов: {count}.")
    return count


def _parse_entry(value, line):
    fields = line.split(b"\t")
    if len(fields) != 3 or fields[0] != b"":
        raise MalformedTableError(f"Некорректная строка таблицы для символа {value!r}: {line!r}.")
    try:
        probability = float(fields[1].decode('ascii'))
    except (UnicodeDecodeError, ValueError):
        raise MalformedTableError(f"Некорректная вероятность {fields[1]!r} для символа {value!r}.") from None
    if not 0.0 <= probability <= 1.0:
        raise MalformedTableError(f"Вероятность {probability} символа {value!r} вне [0, 1].")
    code = fields[2].decode('ascii', errors='replace')
    if not code or set(code) - {'0', '1'}:
        raise MalformedTableError(f"Некорректное кодовое слово {code!r} для символа {value!r}.")
    return Symbol(value, None, probability), code


def parse(blob):
    """Разбирает закодированный файл на таблицу, коды и битовую строку."""
    header, pos = _read_line(blob, 0)
    count = _parse_count(header)

    symbols = []
    codes = {}
    for i in range(count):
        if pos >= len(blob):
            raise MalformedTableError(f"Ожидалось {count} символов, найдено {i}.")
        value = blob[pos]
        line, pos = _read_line(blob, pos + 1)
        symbol, code = _parse_entry(value, line)
        if value in codes:
            raise MalformedTableError(f"Символ {value!r} встречается в таблице дважды.")
        symbols.append(symbol)
        codes[value] = code

    separator, pos = _read_line(blob, pos)
    if separator:
        raise MalformedTableError(f"Ожидалась пустая строка после {count} символов, найдено {separator!r}.")

    payload = blob[pos:]
    if payload.endswith(b"\r\n"):
        payload = payload[:-2]
    elif payload.endswith(b"\n"):
        payload = payload[:-1]
    if payload.translate(None, b"01"):
        raise CorruptPayloadError("Битовая строка содержит символы, отличные от '0' и '1'.")
    return SymbolTable(symbols), codes, payload.decode('ascii')


def decode_bits(bits, codes):
    root = build_code_tree(codes)
    decoded = bytearray()
    node = root
    start = 0
    for i, bit in enumerate(bits):
        if bit == "0":
            node = node.left
        elif bit == "1":
            node = node.right
        else:
            raise CorruptPayloadError(f"Недопустимый бит {bit!r} в позиции {i}.")
        if node is None:
            raise CorruptPayloadError(f"Последовательность {bits[start:i + 1]!r} не соответствует ни одному коду.")
        if node.is_leaf():
            decoded.append(node.symbol)
            node = root
            start = i + 1
    if node is not root:
        raise UnmatchedTrailingBitsError(start, bits[start:])
    return bytes(decoded)


def decode(blob):
    table, codes, bits = parse(blob)
    data = decode_bits(bits, codes)
    log.info("Decode: %d symbols, %d bits -> %d bytes", len(table), len(bits), len(data))
    return DecodeResult(table, codes, bits, data)
