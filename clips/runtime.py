import logging
from typing import Sequence, cast

from clips.builtins import OPERATOR_IMPLS
from clips.operators import Operator
from clips.value import NUMBER_MAX, NUMBER_MIN, Error, Number, SExpr, Symbol, Value

logger = logging.getLogger(__name__)


def evaluate(value: Value) -> Value:
    """Reduces a parsed tree to a single value.

    Failures never raise, they come back as an Error value. The tree passed in is left untouched.
    """
    if isinstance(value, SExpr):
        return evaluate_sexpr(value)
    elif isinstance(value, (Number, Symbol, Error)):
        return value
    else:
        raise TypeError(f"Can't evaluate {value!r}, not a value")


def evaluate_sexpr(sexpr: SExpr) -> Value:
    cells = [evaluate(cell) for cell in sexpr.cells]

    for cell in cells:
        if isinstance(cell, Error):
            return cell

    if not cells:
        return sexpr
    if len(cells) == 1:
        return cells[0]

    head, *operands = cells
    if not isinstance(head, Symbol):
        return Error("S-expression does not start with symbol!")
    return apply_op(head, operands)


def apply_op(op: Symbol, operands: Sequence[Value]) -> Value:
    """Applies an operator to its operands, left to right. Results leaving the 64-bit range are an Error."""
    if not operands:
        return Error("Cannot operate on nothing!")
    for operand in operands:
        if not isinstance(operand, Number):
            logger.debug("%s applied to %s", op, operand.type_name())
            return Error("Cannot operate on non-number!")

    if op.operator is None:
        logger.debug("No operator is named %r", op.name)
        return Error("Unknown operator!")

    first, *rest = cast(list[Number], list(operands))
    if op.operator is Operator.SUB and not rest:
        return _checked(Number(-first.v))

    impl = OPERATOR_IMPLS[op.operator]
    acc: Value = first
    for operand in rest:
        acc = _checked(impl(cast(Number, acc), operand))
        if isinstance(acc, Error):
            break
    return acc


def _checked(result: Value) -> Value:
    if isinstance(result, Number) and not NUMBER_MIN <= result.v <= NUMBER_MAX:
        logger.debug("%d is out of range", result.v)
        return Error("Integer overflow!")
    return result
