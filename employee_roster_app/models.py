from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Employee:
    name: str
    employee_id: int
    salary: float


@dataclass(slots=True)
class SalaryRank:
    rank: int
    name: str
    employee_id: int
    salary: float
