import logging
import math
import operator
from dataclasses import dataclass
from typing import Callable

from rpncalc.errors import CalcEvalError
from rpncalc.tokenizer import Token, TokenType, point_at_token
from rpncalc.utils import Stack

logger = logging.getLogger(__name__)


@dataclass
class EvaluatorError(CalcEvalError):
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        return "\n".join([f"[Evaluator error] {self.errmsg}", *point_at_token(self.tokens, self.error_token_idx)])


def ieee_truediv(x: float, y: float) -> float:
    """``x / y`` with IEEE-754 results for a zero divisor instead of ZeroDivisionError"""
    if y == 0:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y


BinaryOperationImpl = Callable[[float, float], float]

BINARY_OPERATIONS: dict[TokenType, BinaryOperationImpl] = {
    TokenType.PLUS: operator.add,
    TokenType.MINUS: operator.sub,
    TokenType.STAR: operator.mul,
    TokenType.SLASH: ieee_truediv,
}


def evaluate_postfix(tokens: list[Token]) -> float:
    values: Stack[float] = Stack()
    for idx, token in enumerate(tokens):
        if token.type is TokenType.NUMBER:
            if token.value is None:
                raise EvaluatorError("Number token without a value", tokens=tokens, error_token_idx=idx)
            values.push(token.value)
        elif token.type in BINARY_OPERATIONS:
            if len(values) < 2:
                raise EvaluatorError(
                    f"Not enough operands for {token.lexeme!r}", tokens=tokens, error_token_idx=idx
                )
            # right operand is on top
            y = values.pop()
            x = values.pop()
            values.push(BINARY_OPERATIONS[token.type](x, y))
        else:
            raise EvaluatorError(f"Unexpected token {token}", tokens=tokens, error_token_idx=idx)

    if len(values) != 1:
        raise EvaluatorError(
            f"Expression reduced to {len(values)} values instead of one", tokens=tokens, error_token_idx=len(tokens)
        )
    result = values.pop()
    logger.debug("Evaluated %s to %r", " ".join(t.lexeme for t in tokens), result)
    return result
