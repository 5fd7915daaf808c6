import enum
import logging
from dataclasses import dataclass, field
from typing import Optional

from rpncalc.errors import CalcError, CalcEvalError, ParsingError
from rpncalc.evaluator import evaluate_postfix
from rpncalc.postfix import to_postfix
from rpncalc.tokenizer import Token, tokenize
from rpncalc.utils import PrintableEnum

logger = logging.getLogger(__name__)


def calculate(code: str) -> float:
    return evaluate_postfix(to_postfix(tokenize(code)))


class Verdict(PrintableEnum):
    VALUE = enum.auto()
    PARSING_ERROR = enum.auto()
    ERROR = enum.auto()


@dataclass
class Outcome:
    verdict: Verdict
    value: Optional[float] = None
    postfix: list[Token] = field(default_factory=list)
    error: Optional[CalcError] = None


def submit(code: str) -> Outcome:
    """Runs one line through the pipeline, classifying failures instead of raising them"""
    try:
        tokens = tokenize(code)
    except ParsingError as e:
        logger.info("Parsing error in %r: %s", code, e.errmsg)
        return Outcome(verdict=Verdict.PARSING_ERROR, error=e)

    try:
        postfix = to_postfix(tokens)
        value = evaluate_postfix(postfix)
    except CalcEvalError as e:
        logger.info("Evaluation error in %r: %s", code, e.errmsg)
        return Outcome(verdict=Verdict.ERROR, error=e)

    return Outcome(verdict=Verdict.VALUE, value=value, postfix=postfix)
