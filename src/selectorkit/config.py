from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorConfig:
    strict_combinators: bool = False  # reject tokens outside ' ', '+', '~', '>'
    log_level: str = "WARNING"
