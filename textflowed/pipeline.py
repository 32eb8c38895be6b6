from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import LineWidths, ReformatOptions, default_widths
from .convert.flowed import reformat
from .utils.io import WriteResult, read_text, write_text
from .utils.logging import get_logger


@dataclass
class RunConfig:
    input: Optional[Path] = None  # None=stdin
    output: Optional[Path] = None  # None=stdout
    quote: bool = False
    fixed: bool = False
    max_length: Optional[int] = None  # None=process default
    opt_length: Optional[int] = None
    encoding: str = "utf-8"

    def options(self) -> ReformatOptions:
        return ReformatOptions(quote=self.quote, fixed=self.fixed)

    def widths(self) -> LineWidths:
        base = default_widths()
        return LineWidths(
            max_length=base.max_length if self.max_length is None else self.max_length,
            opt_length=base.opt_length if self.opt_length is None else self.opt_length,
        )


def run(cfg: RunConfig) -> WriteResult:
    logger = get_logger()
    widths = cfg.widths()
    source = str(cfg.input) if cfg.input else "<stdin>"
    logger.debug(f"Source: {source} max={widths.max_length} opt={widths.opt_length}")

    text = read_text(cfg.input, encoding=cfg.encoding)
    result = reformat(text, cfg.options(), widths=widths)
    written = write_text(cfg.output, result, encoding=cfg.encoding)
    if written.path is not None:
        logger.info(f"Saved: {written.path} ({written.bytes_written} bytes)")
    return written
