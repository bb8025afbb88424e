from __future__ import annotations

import random


# Records loaded by the CLI demo, in insertion order.
DEMO_EMPLOYEES_TABLE: list[tuple[str, int, float]] = [
    ("Alice", 101, 5000.0),
    ("Bob", 102, 6000.0),
    ("Charlie", 103, 5500.0),
    ("David", 104, 5200.0),
    ("Eve", 105, 5800.0),
]

FIRST_NAMES_TABLE: list[str] = [
    "Alex", "Blair", "Casey", "Devon", "Emery", "Finley", "Harper", "Jordan",
    "Kai", "Logan", "Morgan", "Parker", "Quinn", "Riley", "Sam", "Taylor",
]


def demo_employee_records() -> list[tuple[str, int, float]]:
    return list(DEMO_EMPLOYEES_TABLE)


def build_employee_records(total: int = 50, seed: int = 7) -> list[tuple[str, int, float]]:
    """Deterministic (name, id, salary) rows with unique ids starting at 1.

    Salaries are drawn from a coarse grid so equal salaries occur often enough
    to exercise tie ordering in rankings.
    """
    rng = random.Random(seed)
    records: list[tuple[str, int, float]] = []
    for employee_id in range(1, total + 1):
        name = f"{rng.choice(FIRST_NAMES_TABLE)}-{employee_id:03d}"
        salary = float(rng.randrange(3000, 9001, 250))
        records.append((name, employee_id, salary))
    return records
