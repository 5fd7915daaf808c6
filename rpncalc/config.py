"""Settings of the interactive evaluator"""

VERSION = "0.1"

REPL_CONFIG = {
    "banner": (
        f"Simple math expression evaluator v {VERSION}\n"
        "Unary + and - is not supported. Operations: + - * / \n"
        "Use (.) for decimal point, blank line to exit \n"
    ),
    "prompt": "(expr): ",
    "result_template": "(result): {}",
    "result_format": "{:g}",  # same as the default formatting of C++ streams
    "parsing_error_message": "-- parsing error --",
    "error_message": "-- error --",
}

LOGGING_CONFIG = {
    "level": "WARNING",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}
