import argparse
import logging
import sys

from .codec import decode, encode
from .errors import FanoError
from .stats import summarize
from .tree import build_code_tree, display_tree, format_symbol

log = logging.getLogger("fano")

DEFAULT_ENCODED_NAME = "encoded.txt"
DEFAULT_DECODED_NAME = "decoded.txt"


class UsageParser(argparse.ArgumentParser):
    # Неверный вызов: показать справку и выйти без ошибки
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(0, f"{self.prog}: {message}\n")


def display_codes(table, codes):
    print("Коды Шеннона–Фано:")
    print(len(table))
    for symbol in table:
        print(f"{format_symbol(symbol.value)}\t{symbol.probability:f}\t{codes[symbol.value]}")


def display_stats(stats):
    print("Статистика:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


def encode_file(input_file, output_file, display=False, display_tree_flag=False, show_stats=False):
    with open(input_file, 'rb') as f:
        data = f.read()
    result = encode(data)
    with open(output_file, 'wb') as f:
        f.write(result.data)
    log.info("Encode: %s (%dB) -> %s (%dB)", input_file, len(data), output_file, len(result.data))
    if not result.table:
        print("Входной файл пуст.")
        return result
    if display:
        display_codes(result.table, result.codes)
        print("Закодированный текст:")
        print(result.bits)
    if display_tree_flag:
        print("Дерево Шеннона–Фано:")
        display_tree(build_code_tree(result.codes))
    if show_stats:
        display_stats(summarize(result, len(data)))
    return result


def decode_file(input_file, output_file, display=False, display_tree_flag=False):
    with open(input_file, 'rb') as f:
        blob = f.read()
    result = decode(blob)
    with open(output_file, 'wb') as f:
        f.write(result.data)
    log.info("Decode: %s (%dB) -> %s (%dB)", input_file, len(blob), output_file, len(result.data))
    if not result.table:
        print("Входной файл не содержит данных для декодирования.")
        return result
    if display_tree_flag:
        print("Дерево Шеннона–Фано:")
        display_tree(build_code_tree(result.codes))
    if display:
        print("Декодированный текст:")
        print(result.data.decode('utf-8', errors='replace'))
    return result


def build_parser():
    parser = UsageParser(prog="fano", description="Система кодирования и декодирования с использованием алгоритма Шеннона–Фано.")
    parser.add_argument('-v', '--verbose', action='store_true', help='Подробный журнал (DEBUG)')
    parser.add_argument('-q', '--quiet', action='store_true', help='Только предупреждения и ошибки')
    subparsers = parser.add_subparsers(dest='command', help='Команда: encode или decode')

    # Подкоманда encode
    encode_parser = subparsers.add_parser('encode', help='Кодирование файла')
    encode_parser.add_argument('input', help='Входной файл для кодирования')
    encode_parser.add_argument('output', nargs='?', default=DEFAULT_ENCODED_NAME,
                               help=f'Выходной файл с закодированными данными (по умолчанию {DEFAULT_ENCODED_NAME})')
    encode_parser.add_argument('-c', '--codes', action='store_true', help='Отобразить коды Шеннона–Фано и закодированный текст')
    encode_parser.add_argument('-t', '--tree', action='store_true', help='Отобразить дерево Шеннона–Фано')
    encode_parser.add_argument('-s', '--stats', action='store_true', help='Отобразить энтропию и среднюю длину кода')

    # Подкоманда decode
    decode_parser = subparsers.add_parser('decode', help='Декодирование файла')
    decode_parser.add_argument('input', help='Входной файл с закодированными данными')
    decode_parser.add_argument('output', nargs='?', default=DEFAULT_DECODED_NAME,
                               help=f'Выходной файл с декодированными данными (по умолчанию {DEFAULT_DECODED_NAME})')
    decode_parser.add_argument('-c', '--codes', action='store_true', help='Отобразить декодированный текст')
    decode_parser.add_argument('-t', '--tree', action='store_true', help='Отобразить дерево Шеннона–Фано')
    return parser


def configure_logging(verbose=False, quiet=False):
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] %(message)s",
        level=level,
    )


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    try:
        if args.command == 'encode':
            encode_file(args.input, args.output, display=args.codes,
                        display_tree_flag=args.tree, show_stats=args.stats)
        elif args.command == 'decode':
            decode_file(args.input, args.output, display=args.codes, display_tree_flag=args.tree)
        else:
            parser.print_help()
    except (OSError, FanoError) as exc:
        log.error("%s: %s", args.command, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
