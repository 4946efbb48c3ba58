"""CLI Utility Functions"""

import re

QUOTE_CHARS = ('"', '`')

_LINE_BREAK = re.compile(r'[\r\n]')


def normalize(raw: str) -> str:
    """Reduce raw model output to a single clean commit message line.

    Keeps only the first line, trims whitespace and peels matching
    straight double quotes or backticks wrapped around the whole line.
    Applying it twice gives the same result as applying it once.
    """
    cleaned = _LINE_BREAK.split(raw.strip(), maxsplit=1)[0].strip()
    while len(cleaned) >= 2 and cleaned[0] == cleaned[-1] and cleaned[0] in QUOTE_CHARS:
        cleaned = cleaned[1:-1].strip()
    return cleaned
