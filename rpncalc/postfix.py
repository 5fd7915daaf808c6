"""Reordering of infix token lists into postfix (Reverse Polish) order.

This is a reduced shunting-yard: an operator that does not bind strictly
tighter than the top of the operator stack flushes the *whole* stack to the
output, not only the operators of higher or equal precedence. Hence
``1 + 2 * 3 * 4`` becomes ``1 2 3 * + 4 *`` and evaluates to 28, and an open
bracket caught in such a flush ends up in the output, which is reported as an
unresolved bracket: ``(1 + 2 + 3)`` is rejected.
"""
import logging
from dataclasses import dataclass

from rpncalc.errors import CalcEvalError
from rpncalc.tokenizer import Token, TokenType, point_at_token
from rpncalc.utils import Stack

logger = logging.getLogger(__name__)


@dataclass
class UnresolvedBracketError(CalcEvalError):
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        return "\n".join([f"[Postfix error] {self.errmsg}", *point_at_token(self.tokens, self.error_token_idx)])


OP_PRECEDENCE = {
    TokenType.PLUS: 10,
    TokenType.MINUS: 10,
    TokenType.STAR: 20,
    TokenType.SLASH: 20,
}


def get_op_precedence(token: Token) -> int:
    return OP_PRECEDENCE.get(token.type, -1)


def to_postfix(tokens: list[Token]) -> list[Token]:
    output: list[Token] = []
    op_stack: Stack[Token] = Stack()

    for token in tokens:
        if token.type is TokenType.NUMBER:
            output.append(token)
        elif token.is_operator:
            # a bracket on top hides everything below it from comparison
            if op_stack.is_empty() or op_stack.peek().is_bracket:
                op_stack.push(token)
            elif get_op_precedence(token) > get_op_precedence(op_stack.peek()):
                op_stack.push(token)
            else:
                output.extend(op_stack.drain())
                op_stack.push(token)
        elif token.type is TokenType.BRACKET_OPEN:
            op_stack.push(token)
        elif token.type is TokenType.BRACKET_CLOSE:
            while not op_stack.is_empty():
                top = op_stack.pop()
                if top.type is TokenType.BRACKET_OPEN:
                    break
                if not top.is_bracket:
                    output.append(top)
        else:
            raise CalcEvalError(f"Unexpected token in infix expression: {token}")

    output.extend(op_stack.drain())
    logger.debug("Postfix order: %s", " ".join(str(t) for t in output))

    for idx, token in enumerate(output):
        if token.is_bracket:
            raise UnresolvedBracketError("Unresolved bracket", tokens=output, error_token_idx=idx)
    return output
