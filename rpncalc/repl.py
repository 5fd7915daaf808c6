import argparse
import logging
from typing import Optional

from rpncalc.config import LOGGING_CONFIG, REPL_CONFIG, VERSION
from rpncalc.pipeline import Outcome, Verdict, submit

logger = logging.getLogger(__name__)


def format_result(value: float) -> str:
    return REPL_CONFIG["result_format"].format(value)


def report(outcome: Outcome, debug: bool = False) -> None:
    if outcome.verdict is Verdict.PARSING_ERROR:
        print(REPL_CONFIG["parsing_error_message"])
    elif outcome.verdict is Verdict.ERROR:
        print(REPL_CONFIG["error_message"])
    else:
        print(REPL_CONFIG["result_template"].format(format_result(outcome.value)))  # type: ignore[arg-type]
        if debug:
            for token in outcome.postfix:
                print(f"  {token} {token.value if token.value is not None else ''}".rstrip())


def repl(debug: bool = False) -> None:
    print(REPL_CONFIG["banner"])
    while True:
        try:
            line = input(REPL_CONFIG["prompt"])
        except EOFError:
            break

        code = line.strip()
        if not code:
            break

        report(submit(code), debug=debug)
    logger.debug("Read loop finished")


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="rpncalc", description="Simple math expression evaluator")
    parser.add_argument("--debug", action="store_true", help="print the postfix token sequence of every result")
    parser.add_argument("--log-level", default=LOGGING_CONFIG["level"], help="logging level (default: %(default)s)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format=LOGGING_CONFIG["format"])
    repl(debug=args.debug)


if __name__ == "__main__":
    main()
