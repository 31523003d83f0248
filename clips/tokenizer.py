import enum
import re
from dataclasses import dataclass

from clips.operators import OPERATOR_NAMES, WORD_OPERATORS
from clips.utils import ParseError, PrintableEnum, format_diagnostic


@dataclass
class TokenizerError(ParseError):
    errmsg: str
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        return format_diagnostic(f"[Tokenizer error] {self.errmsg}", self.code, self.error_char_idx)


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    SYMBOL = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()


@dataclass
class Token:
    type: TokenType
    lexeme: str
    char_idx: int = 0

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


NUMBER_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+)?")

SINGLE_CHAR_TOKENS = {
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
}
SINGLE_CHAR_TOKENS.update({name: TokenType.SYMBOL for name in OPERATOR_NAMES if len(name) == 1})


def tokenize(code: str) -> list[Token]:
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        # "-5" is a literal, "- 5" is the operator followed by a literal
        number_match = NUMBER_PATTERN.match(code, i)
        if number_match is not None:
            tokens.append(Token(type=TokenType.NUMBER, lexeme=number_match.group(), char_idx=i))
            i = number_match.end() - 1  # to account for += 1 later
        elif code[i].isalpha():
            word_end_idx = i + 1
            while word_end_idx < len(code) and code[word_end_idx].isalpha():
                word_end_idx += 1
            word = code[i:word_end_idx]
            if word not in WORD_OPERATORS:
                raise TokenizerError(f"Unknown symbol: {word!r}", code=code, error_char_idx=i)
            tokens.append(Token(type=TokenType.SYMBOL, lexeme=word, char_idx=i))
            i = word_end_idx - 1  # to account for += 1 later
        elif code[i] in SINGLE_CHAR_TOKENS:
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[code[i]], lexeme=code[i], char_idx=i))
        elif code[i].isspace():
            pass
        else:
            raise TokenizerError(f"Unexpected character: {code[i]!r}", code=code, error_char_idx=i)
        i += 1

    return tokens

