import enum
import logging
import re
from dataclasses import dataclass
from typing import Optional

from rpncalc.errors import ParsingError
from rpncalc.utils import PrintableEnum

logger = logging.getLogger(__name__)


@dataclass
class TokenizerError(ParsingError):
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        print_start_idx = max(0, self.error_char_idx - 10)
        print_ellipsis_pre = print_start_idx > 0
        print_end_idx = min(len(self.code), self.error_char_idx + 10)
        print_ellipsis_post = print_end_idx < len(self.code)
        return "\n".join(
            [
                f"[Tokenizer error] {self.errmsg}",
                (
                    ("..." if print_ellipsis_pre else "")
                    + f"{self.code[print_start_idx:print_end_idx]}"
                    + ("..." if print_ellipsis_post else "")
                ),
                " " * (self.error_char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
            ]
        )


@dataclass
class TokenStructureError(ParsingError):
    tokens: list["Token"]

    def __str__(self) -> str:
        return "\n".join([f"[Tokenizer error] {self.errmsg}", untokenize(self.tokens)])


class TokenType(PrintableEnum):
    UNKNOWN = enum.auto()
    NUMBER = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()


OPERATOR_TYPES = frozenset({TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH})
BRACKET_TYPES = frozenset({TokenType.BRACKET_OPEN, TokenType.BRACKET_CLOSE})


@dataclass
class Token:
    type: TokenType
    lexeme: str
    value: Optional[float] = None

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"

    @property
    def is_operator(self) -> bool:
        return self.type in OPERATOR_TYPES

    @property
    def is_bracket(self) -> bool:
        return self.type in BRACKET_TYPES


SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
}

_NUMBER_PREFIX_RE = re.compile(r"[0-9]*(?:\.[0-9]*)?")


def _is_valid_in_number(s: str) -> bool:
    return s in "0123456789."


def parse_number(lexeme: str) -> float:
    """Parses the longest leading decimal prefix of ``lexeme``, like C's ``atof``.

    Everything after the prefix is ignored, so ``"1.2.3"`` gives ``1.2``; a
    lexeme without any digit in its prefix (``"."``) gives ``0.0``.
    """
    prefix = _NUMBER_PREFIX_RE.match(lexeme).group()  # type: ignore[union-attr]
    if not any(c.isdigit() for c in prefix):
        return 0.0
    return float(prefix)


@dataclass
class _TokenBuilder:
    type: TokenType = TokenType.UNKNOWN
    lexeme: str = ""

    def is_pending(self) -> bool:
        return self.type is not TokenType.UNKNOWN

    def finish(self) -> Token:
        value = parse_number(self.lexeme) if self.type is TokenType.NUMBER else None
        token = Token(type=self.type, lexeme=self.lexeme, value=value)
        self.type = TokenType.UNKNOWN
        self.lexeme = ""
        return token


def tokenize(code: str) -> list[Token]:
    tokens: list[Token] = []
    pending = _TokenBuilder()
    for i, char in enumerate(code):
        if char.isspace():
            # whitespace separates numbers: "1 2" is two tokens, not 12
            if pending.is_pending():
                tokens.append(pending.finish())
        elif _is_valid_in_number(char):
            pending.type = TokenType.NUMBER
            pending.lexeme += char
        elif char in SINGLE_CHAR_TOKENS:
            if pending.is_pending():
                tokens.append(pending.finish())
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[char], lexeme=char))
        else:
            raise TokenizerError(f"Unexpected character: {char!r}", code=code, error_char_idx=i)

    if pending.is_pending():
        tokens.append(pending.finish())

    logger.debug("Tokenized %r: %s", code, " ".join(str(t) for t in tokens))
    verify_tokens(tokens)
    return tokens


def verify_tokens(tokens: list[Token]) -> None:
    """Counting check over a finished token list.

    Catches unbalanced brackets and operand/operator counts that no binary
    expression has, but not misplaced tokens: ``1 2 +`` passes.
    """
    numbers_count = 0
    operators_count = 0
    open_brackets_count = 0
    close_brackets_count = 0
    for token in tokens:
        if token.type is TokenType.NUMBER:
            numbers_count += 1
        elif token.is_operator:
            operators_count += 1
        elif token.type is TokenType.BRACKET_OPEN:
            open_brackets_count += 1
        elif token.type is TokenType.BRACKET_CLOSE:
            close_brackets_count += 1
        else:
            raise TokenStructureError(f"Unclassified token {token.lexeme!r}", tokens=tokens)

    if open_brackets_count != close_brackets_count:
        raise TokenStructureError(
            f"Unbalanced brackets: {open_brackets_count} opened, {close_brackets_count} closed", tokens=tokens
        )
    if numbers_count != operators_count + 1:
        raise TokenStructureError(
            f"Expected {operators_count + 1} numbers for {operators_count} operators, found {numbers_count}",
            tokens=tokens,
        )


def untokenize(tokens: list[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens)

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)
    return result


def point_at_token(tokens: list[Token], error_token_idx: int) -> list[str]:
    """Renders the token list with a caret under the token at ``error_token_idx``"""
    rendered = " ".join(t.lexeme for t in tokens)
    offset = len(" ".join(t.lexeme for t in tokens[:error_token_idx]))
    if error_token_idx > 0:
        offset += 1
    return [rendered, " " * offset + "^"]
