import enum

from clips.utils import PrintableEnum


class Operator(PrintableEnum):
    ADD = enum.auto()
    SUB = enum.auto()
    MUL = enum.auto()
    DIV = enum.auto()
    MOD = enum.auto()


OPERATOR_NAMES: dict[str, Operator] = {
    "+": Operator.ADD,
    "add": Operator.ADD,
    "-": Operator.SUB,
    "sub": Operator.SUB,
    "*": Operator.MUL,
    "mul": Operator.MUL,
    "/": Operator.DIV,
    "div": Operator.DIV,
    "%": Operator.MOD,
}

WORD_OPERATORS = frozenset(name for name in OPERATOR_NAMES if name.isalpha())
