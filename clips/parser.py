import logging
from dataclasses import dataclass

from clips.tokenizer import Token, TokenType, tokenize
from clips.utils import ParseError, format_diagnostic
from clips.value import NUMBER_MAX, NUMBER_MIN, Error, Number, SExpr, Symbol, Value

logger = logging.getLogger(__name__)

MAX_NESTING_DEPTH = 250


@dataclass
class ParserError(ParseError):
    errmsg: str
    code: str
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        if self.error_token_idx < len(self.tokens):
            error_char_idx = self.tokens[self.error_token_idx].char_idx
        else:
            error_char_idx = len(self.code)
        return format_diagnostic(f"[Parser error] {self.errmsg}", self.code, error_char_idx)


def parse(code: str) -> SExpr:
    """Parses a line of input into a root S-expression holding every top-level expression.

    An empty (or blank) line gives an empty S-expression. Raises TokenizerError or ParserError,
    both subclasses of ParseError, on malformed input.
    """
    tokens = tokenize(code)
    logger.debug("Tokens: %s", " ".join(str(t) for t in tokens))
    cells, i = _consume_expressions(tokens, 0, code=code, depth=0)
    if i < len(tokens):
        # _consume_expressions only stops early on a closing bracket
        raise ParserError("Unexpected closing bracket", code=code, tokens=tokens, error_token_idx=i)
    root = SExpr(tuple(cells))
    logger.debug("Parsed: %s", root)
    return root


def _consume_expressions(tokens: list[Token], i: int, code: str, depth: int) -> tuple[list[Value], int]:
    cells: list[Value] = []
    while i < len(tokens) and tokens[i].type is not TokenType.BRACKET_CLOSE:
        expr, i = _consume_expression(tokens, i, code=code, depth=depth)
        cells.append(expr)
    return cells, i


def _consume_expression(tokens: list[Token], i: int, code: str, depth: int) -> tuple[Value, int]:
    token = tokens[i]
    if token.type is TokenType.NUMBER:
        return read_number(token.lexeme), i + 1
    elif token.type is TokenType.SYMBOL:
        return Symbol(token.lexeme), i + 1
    elif token.type is TokenType.BRACKET_OPEN:
        if depth >= MAX_NESTING_DEPTH:
            raise ParserError("Expression is nested too deeply", code=code, tokens=tokens, error_token_idx=i)
        cells, j = _consume_expressions(tokens, i + 1, code=code, depth=depth + 1)
        if j >= len(tokens):
            raise ParserError("Unclosed bracket", code=code, tokens=tokens, error_token_idx=i)
        return SExpr(tuple(cells)), j + 1  # skipping closing bracket
    else:
        raise ParserError(
            f"Internal error, unexpected token {token.type}", code=code, tokens=tokens, error_token_idx=i
        )


def read_number(lexeme: str) -> Value:
    """Lifts a number literal into a Number, or an Error if it is out of range.

    Literals are read with integer semantics: a fractional part is dropped, truncating toward zero.
    """
    integer_part, _, fractional_part = lexeme.partition(".")
    if fractional_part:
        logger.warning("Fractional part of %s is discarded, numbers are integers", lexeme)
    if len(integer_part.lstrip("-").lstrip("0")) > len(str(NUMBER_MAX)):
        return Error("Invalid number")
    x = int(integer_part)
    if not NUMBER_MIN <= x <= NUMBER_MAX:
        return Error("Invalid number")
    return Number(x)
