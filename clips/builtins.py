from clips.operators import Operator
from clips.value import BinaryOperationImpl, Error, Number, Value

OPERATOR_IMPLS: dict[Operator, BinaryOperationImpl] = dict()


def register_operator(operator: Operator):
    def decorator(fn: BinaryOperationImpl) -> BinaryOperationImpl:
        OPERATOR_IMPLS[operator] = fn
        return fn

    return decorator


def _trunc_div(a: int, b: int) -> int:
    # Python's // floors, integer division here truncates toward zero
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


@register_operator(Operator.ADD)
def add_(a: Number, b: Number) -> Value:
    return Number(a.v + b.v)


@register_operator(Operator.SUB)
def sub_(a: Number, b: Number) -> Value:
    return Number(a.v - b.v)


@register_operator(Operator.MUL)
def mul_(a: Number, b: Number) -> Value:
    return Number(a.v * b.v)


@register_operator(Operator.DIV)
def div_(a: Number, b: Number) -> Value:
    if b.v == 0:
        return Error("Division by zero!")
    return Number(_trunc_div(a.v, b.v))


@register_operator(Operator.MOD)
def mod_(a: Number, b: Number) -> Value:
    if b.v == 0:
        return Error("Division by zero!")
    return Number(a.v - b.v * _trunc_div(a.v, b.v))
