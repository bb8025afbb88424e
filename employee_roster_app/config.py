from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    currency_symbol: str = "$"
    allow_duplicate_ids: bool = False
    logger_name: str = "employee_roster"
