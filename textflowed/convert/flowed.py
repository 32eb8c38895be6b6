"""Reformatting of RFC 2646 format=flowed text."""
from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from ..config import LineWidths, ReformatOptions, default_widths
from ..utils.logging import get_logger
from .lines import QUOTE_CHAR, is_flowed, quote_depth, stuff, trim, unquote, unstuff


logger = get_logger(__name__)

OptionsArg = Union[ReformatOptions, Mapping[str, Any], None]


def split_lines(text: str) -> List[str]:
    """Split on every newline; trailing empty lines are dropped."""
    lines = text.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def _find_break(candidate: str, start: int, opt_length: int) -> int:
    # Last space with at most opt_length characters before it.
    i = candidate.rfind(" ", start, opt_length + 1)
    if i == -1:
        # One long chunk fills the window: break right after it.
        i = candidate.find(" ", start)
    return i


def rewrap(line: str, depth: int, widths: LineWidths) -> List[str]:
    """Split an over-long paragraph into soft-broken, quoted lines."""
    out = []
    prefix = QUOTE_CHAR * depth
    start = depth + 1
    while line:
        candidate = prefix + stuff(line, depth)
        if len(candidate) <= widths.opt_length:
            out.append(candidate)
            break
        i = _find_break(candidate, start, widths.opt_length)
        if i == -1:
            if len(candidate) > widths.max_length:
                logger.debug(f"Unbreakable line of {len(candidate)} chars kept whole")
            out.append(candidate)
            break
        out.append(candidate[: i + 1])
        line = candidate[i + 1 :]
    return out


def reformat(text: str, options: OptionsArg = None, *, widths: Optional[LineWidths] = None) -> str:
    """Reformat format=flowed ``text``.

    Flowed lines are joined into paragraphs, which are rewrapped to
    ``widths.opt_length`` when longer than ``widths.max_length``. Quote depth
    and space-stuffing are preserved. ``options`` may be a ``ReformatOptions``
    or a mapping with ``quote``/``fixed`` keys. Without ``widths`` the
    process-wide defaults from ``textflowed.config`` apply.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, not {type(text).__name__}")
    opts = ReformatOptions.coerce(options)
    widths = widths or default_widths()

    lines = split_lines(text)
    out: List[str] = []
    pos = 0
    while pos < len(lines):
        raw = lines[pos]
        pos += 1
        depth = quote_depth(raw)
        line = unquote(raw)
        if not opts.fixed:
            line = unstuff(line)

        # Quoted text stays flowed even when the outer message is fixed.
        if not (opts.fixed and depth == 0):
            while is_flowed(line) and pos < len(lines) and quote_depth(lines[pos]) == depth:
                line += unquote(lines[pos])
                pos += 1
        line = trim(line)

        if opts.quote:
            depth += 1

        if not line:
            out.append(QUOTE_CHAR * depth)
        elif len(line) + depth <= widths.max_length - 1:
            out.append(QUOTE_CHAR * depth + stuff(line, depth))
        else:
            out.extend(rewrap(line, depth, widths))

    logger.debug(f"Reformatted {len(lines)} input lines into {len(out)} lines")
    if not out:
        return ""
    return "\n".join(out) + "\n"


def quote(text: str, *, widths: Optional[LineWidths] = None) -> str:
    """Shorthand for ``reformat(text, {"quote": True})``."""
    return reformat(text, ReformatOptions(quote=True), widths=widths)


def quote_fixed(text: str, *, widths: Optional[LineWidths] = None) -> str:
    """Shorthand for ``reformat(text, {"quote": True, "fixed": True})``."""
    return reformat(text, ReformatOptions(quote=True, fixed=True), widths=widths)
