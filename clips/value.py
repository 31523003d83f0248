import abc
from dataclasses import dataclass, field
from typing import Callable, Optional

from clips.operators import OPERATOR_NAMES, Operator

# numbers are held to the range of a signed 64-bit machine word
NUMBER_MIN = -(2**63)
NUMBER_MAX = 2**63 - 1


class Value(abc.ABC):
    @classmethod
    @abc.abstractmethod
    def type_name(cls) -> str:
        ...


BinaryOperationImpl = Callable[["Number", "Number"], Value]


@dataclass
class Number(Value):
    v: int

    @classmethod
    def type_name(cls) -> str:
        return "Number"

    def __str__(self) -> str:
        return str(self.v)


@dataclass
class Error(Value):
    message: str

    @classmethod
    def type_name(cls) -> str:
        return "Error"

    def __str__(self) -> str:
        return f"Error: {self.message}"


@dataclass
class Symbol(Value):
    name: str
    # resolved once, when the symbol is built from its token
    operator: Optional[Operator] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.operator = OPERATOR_NAMES.get(self.name)

    @classmethod
    def type_name(cls) -> str:
        return "Symbol"

    def __str__(self) -> str:
        return self.name


@dataclass
class SExpr(Value):
    cells: tuple[Value, ...] = ()

    @classmethod
    def type_name(cls) -> str:
        return "S-expression"

    def __str__(self) -> str:
        return "(" + " ".join(str(cell) for cell in self.cells) + ")"
