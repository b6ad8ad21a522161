from .errors import MalformedTableError


class Node:
    __slots__ = ("symbol", "left", "right")

    def __init__(self, symbol=None, left=None, right=None):
        self.symbol = symbol  # Символ (для листьев)
        self.left = left  # Потомок по биту '0'
        self.right = right  # Потомок по биту '1'

    def is_leaf(self):
        return self.symbol is not None


def build_code_tree(codes):
    """Строит префиксное дерево по словарю {символ: кодовое слово}.

    Бросает MalformedTableError, если коды пусты, содержат что-то кроме
    '0'/'1' или не являются префиксными.
    """
    root = Node()
    for symbol, code in codes.items():
        if not code or set(code) - {'0', '1'}:
            raise MalformedTableError(f"Некорректное кодовое слово {code!r} для символа {symbol!r}.")
        node = root
        for bit in code:
            if node.is_leaf():
                raise MalformedTableError(f"Код символа {node.symbol!r} является префиксом кода {code!r}.")
            if bit == '0':
                if node.left is None:
                    node.left = Node()
                node = node.left
            else:
                if node.right is None:
                    node.right = Node()
                node = node.right
        if node.is_leaf() or node.left is not None or node.right is not None:
            raise MalformedTableError(f"Код {code!r} символа {symbol!r} не является префиксным.")
        node.symbol = symbol
    return root


def format_symbol(value):
    if value == 0x20:
        return "' ' (пробел)"
    if value == 0x0A:
        return "'\\n' (новая строка)"
    return repr(bytes([value]))[1:]


def display_tree(root):
    stack = [(root, '')]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf():
            print(f"{prefix}Leaf: {format_symbol(node.symbol)}")
        else:
            print(f"{prefix}Node:")
            if node.right:
                stack.append((node.right, prefix + " 1-"))
            if node.left:
                stack.append((node.left, prefix + " 0-"))
