from collections import defaultdict


class Symbol:
    __slots__ = ("value", "count", "probability")

    def __init__(self, value, count, probability):
        self.value = value  # Значение байта (0..255)
        self.count = count  # Число вхождений (None для таблицы из файла)
        self.probability = probability  # Вероятность символа

    def __repr__(self):
        return f"Symbol({self.value!r}, count={self.count}, p={self.probability:f})"

    def __eq__(self, other):
        if not isinstance(other, Symbol):
            return NotImplemented
        return (self.value, self.count, self.probability) == (other.value, other.count, other.probability)


class SymbolTable:
    """Символы, упорядоченные по убыванию вероятности.

    Позиция символа в таблице (а не его значение) используется как индекс
    при рекурсивном разбиении. Таблица не меняется после построения.
    """

    def __init__(self, symbols, total=None):
        self._symbols = tuple(symbols)
        self.total = total

    def __len__(self):
        return len(self._symbols)

    def __iter__(self):
        return iter(self._symbols)

    def __getitem__(self, index):
        return self._symbols[index]

    def __repr__(self):
        return f"SymbolTable({list(self._symbols)!r}, total={self.total})"

    def values(self):
        return [symbol.value for symbol in self._symbols]


def build_frequency_table(data):
    frequency = defaultdict(int)
    for byte in data:
        frequency[byte] += 1
    return dict(frequency), len(data)


def build_symbol_table(frequency, total=None):
    if total is None:
        total = sum(frequency.values())
    if not frequency:
        return SymbolTable((), total=0)
    # Равные частоты упорядочены по значению байта
    order = sorted(frequency.items(), key=lambda kv: (-kv[1], kv[0]))
    return SymbolTable(
        (Symbol(value, count, count / total) for value, count in order),
        total=total,
    )
