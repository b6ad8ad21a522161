class FanoError(Exception):
    """Базовая ошибка кодека Шеннона–Фано."""


class MalformedTableError(FanoError, ValueError):
    """Таблица кодов в закодированном файле повреждена или некорректна."""


class CorruptPayloadError(FanoError, ValueError):
    """Закодированная битовая строка не соответствует таблице кодов."""


class UnmatchedTrailingBitsError(CorruptPayloadError):
    """Битовая строка обрывается посреди кодового слова."""

    def __init__(self, position, pending):
        self.position = position  # Индекс первого незавершённого бита
        self.pending = pending  # Сами незавершённые биты
        super().__init__(
            f"Битовая строка обрывается посреди кодового слова "
            f"(позиция {position}, остаток {pending!r})."
        )


class DegenerateAlphabetError(FanoError, ValueError):
    """Нельзя построить коды для пустого алфавита."""
