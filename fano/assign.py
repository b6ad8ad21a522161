import logging

from .errors import DegenerateAlphabetError

log = logging.getLogger(__name__)


# -------------------- Шеннон–Фано --------------------
def _weight(symbol):
    # Для таблицы из файла известны только вероятности
    return symbol.count if symbol.count is not None else symbol.probability


def _split_index(weights, lo, hi, bits):
    """Дописывает очередной бит символам [lo, hi] и возвращает точку разбиения.

    Символ получает '0', пока накопленная сумма (включая его самого) не
    превышает половины суммы по интервалу, иначе '1'. Сравнение
    2 * running <= total на целых частотах точно совпадает со сравнением
    вероятностей p <= total / 2.
    """
    total = sum(weights[lo:hi + 1])
    running = 0
    isp = -1
    for i in range(lo, hi + 1):
        running += weights[i]
        if 2 * running > total:
            isp = i
            break
    # Нижняя часть не может быть пустой: первый символ идёт в неё один
    if isp <= lo:
        isp = lo + 1
    for i in range(lo, isp):
        bits[i].append('0')
    for i in range(isp, hi + 1):
        bits[i].append('1')
    return isp


def _assign(weights, lo, hi, bits):
    if lo == hi:
        return
    if hi - lo == 1:
        bits[lo].append('0')
        bits[hi].append('1')
        return
    isp = _split_index(weights, lo, hi, bits)
    log.debug("split [%d, %d] at %d", lo, hi, isp)
    _assign(weights, lo, isp - 1, bits)
    _assign(weights, isp, hi, bits)


def assign_range(table, lo, hi):
    """Строит кодовые слова для символов таблицы с позициями [lo, hi].

    Возвращает список кодовых слов по позициям интервала. Интервал должен
    быть непустым и лежать внутри таблицы.
    """
    if not 0 <= lo <= hi < len(table):
        raise DegenerateAlphabetError(
            f"Некорректный интервал [{lo}, {hi}] для таблицы из {len(table)} символов."
        )
    weights = [_weight(symbol) for symbol in table]
    bits = [[] for _ in range(len(table))]
    _assign(weights, lo, hi, bits)
    return [''.join(bits[i]) for i in range(lo, hi + 1)]


def assign_codewords(table):
    if len(table) == 0:
        raise DegenerateAlphabetError("Таблица символов пуста.")
    if len(table) == 1:
        # Единственный символ получает однобитный код
        return {table[0].value: '0'}
    codes = assign_range(table, 0, len(table) - 1)
    return {symbol.value: code for symbol, code in zip(table, codes)}
# -----------------------------------------------------
