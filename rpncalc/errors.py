from dataclasses import dataclass


@dataclass
class CalcError(Exception):
    errmsg: str

    def __str__(self) -> str:
        return self.errmsg


class ParsingError(CalcError):
    """Lexical errors and token counts that can't form a binary expression"""


class CalcEvalError(CalcError):
    """Unresolved brackets after reordering and failed postfix reduction"""
