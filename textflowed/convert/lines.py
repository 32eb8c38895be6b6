from __future__ import annotations

QUOTE_CHAR = ">"
MBOX_FROM = "From "


def quote_depth(line: str) -> int:
    """Number of leading '>' quote markers."""
    return len(line) - len(line.lstrip(QUOTE_CHAR))


def unquote(line: str) -> str:
    return line.lstrip(QUOTE_CHAR)


def is_flowed(line: str) -> bool:
    """True if the line ends in a soft break.

    A line made only of spaces is treated as a hard break, so sloppy input
    with whitespace-only lines does not swallow the rest of the message.
    """
    if not line.strip(" "):
        return False
    return line.endswith(" ")


def trim(line: str) -> str:
    return line.rstrip(" ")


def unstuff(line: str) -> str:
    if line.startswith(" "):
        return line[1:]
    return line


def stuff(line: str, depth: int = 0) -> str:
    # Quoted lines always get a space after the markers, for readability.
    if line.startswith((" ", QUOTE_CHAR, MBOX_FROM)) or depth > 0:
        return " " + line
    return line
