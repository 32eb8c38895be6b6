from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Union

# Lines longer than this are rewrapped, unless a single word makes it impossible.
MAX_LENGTH = 79
# Rewrapped lines are split at this length.
OPT_LENGTH = 72


@dataclass(frozen=True)
class ReformatOptions:
    quote: bool = False  # add one level of quoting to every line
    fixed: bool = False  # unquoted input lines are format=fixed

    @classmethod
    def coerce(cls, value: Union["ReformatOptions", Mapping[str, Any], None]) -> "ReformatOptions":
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        known = {f.name for f in fields(cls)}
        unknown = set(value) - known
        if unknown:
            raise TypeError(f"Unknown reformat options: {', '.join(sorted(unknown))}")
        return cls(**{k: bool(v) for k, v in value.items()})


@dataclass(frozen=True)
class LineWidths:
    max_length: int = MAX_LENGTH
    opt_length: int = OPT_LENGTH

    def __post_init__(self) -> None:
        _check_widths(self.max_length, self.opt_length)


def _check_widths(max_length: int, opt_length: int) -> None:
    if opt_length <= 0:
        raise ValueError(f"opt_length must be positive, got {opt_length}")
    if opt_length >= max_length:
        raise ValueError(f"opt_length ({opt_length}) must be less than max_length ({max_length})")


def default_widths() -> LineWidths:
    """Widths from the current process-wide defaults."""
    return LineWidths(max_length=MAX_LENGTH, opt_length=OPT_LENGTH)


def set_default_widths(max_length: Optional[int] = None, opt_length: Optional[int] = None) -> LineWidths:
    """Replace the process-wide defaults read by calls without explicit widths.

    Not safe to call while another thread is reformatting; pass ``widths=``
    per call instead when different settings are needed concurrently.
    """
    global MAX_LENGTH, OPT_LENGTH
    new_max = MAX_LENGTH if max_length is None else max_length
    new_opt = OPT_LENGTH if opt_length is None else opt_length
    _check_widths(new_max, new_opt)
    MAX_LENGTH, OPT_LENGTH = new_max, new_opt
    return default_widths()
