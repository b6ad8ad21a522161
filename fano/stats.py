import math


def entropy(table):
    """Энтропия источника в битах на символ."""
    return -sum(s.probability * math.log2(s.probability) for s in table if s.probability > 0)


def average_length(table, codes):
    return sum(s.probability * len(codes[s.value]) for s in table)


def summarize(result, original_size):
    """Сводка по результату кодирования для вывода в консоль."""
    h = entropy(result.table)
    avg = average_length(result.table, result.codes)
    return {
        "symbols": len(result.table),
        "original_size": original_size,
        "encoded_bits": len(result.bits),
        "encoded_size": len(result.data),
        "entropy": round(h, 4),
        "average_length": round(avg, 4),
        "efficiency": round(h / avg, 4) if avg else None,
    }
