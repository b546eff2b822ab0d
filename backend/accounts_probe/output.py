import sys
from typing import List, Optional, TextIO

from .models import QueryFailure, QuerySuccess

SEPARATOR = "----"


def format_delimited(result) -> List[str]:
    lines: List[str] = []
    for account in result.accounts:
        lines.extend([SEPARATOR, f"{account.id} {account.name}", SEPARATOR])
    return lines


def format_raw(result) -> List[str]:
    if isinstance(result, QueryFailure):
        return []
    return [repr(result.rows)]


FORMATTERS = {
    "delimited": format_delimited,
    "raw": format_raw,
}


def print_result(result, output_format: str = "delimited", stream: Optional[TextIO] = None) -> int:
    """Print rows to stdout and return how many account rows were printed."""
    stream = sys.stdout if stream is None else stream
    for line in FORMATTERS[output_format](result):
        print(line, file=stream)
    return len(result.rows) if isinstance(result, QuerySuccess) else 0
