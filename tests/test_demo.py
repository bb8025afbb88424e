from __future__ import annotations

import io

from employee_roster_app.employee_manager import EmployeeManager
from employee_roster_app.logging_orchestrator import LoggingOrchestrator
from employee_roster_app.notifications.console_client import ConsoleNotifier
from employee_roster_app.simulation import DEMO_EMPLOYEES_TABLE, build_employee_records
from main import run_cli_demo


def test_cli_demo_prints_expected_listing(capsys) -> None:
    status = run_cli_demo()

    out = capsys.readouterr().out.splitlines()
    assert status == 0
    assert "Average Salary: $5500" in out
    assert "Updated salary for ID: 102 to $6200" in out

    top = out.index("Displaying top 3 salaries:")
    assert out[top + 1 : top + 4] == ["1. Bob: $6200", "2. Eve: $5800", "3. Charlie: $5500"]
    assert "Employee Found - Name: Charlie, ID: 103, Salary: $5500" in out
    assert "Employee with ID 104 removed." in out

    after = out.index("All Employees after removal:")
    assert out[after + 1 :] == [
        "Name: Alice, ID: 101, Salary: $5000",
        "Name: Bob, ID: 102, Salary: $6200",
        "Name: Charlie, ID: 103, Salary: $5500",
        "Name: Eve, ID: 105, Salary: $5800",
    ]


def test_cli_demo_reports_errors_and_still_succeeds() -> None:
    manager = EmployeeManager(
        notifier=ConsoleNotifier(io.StringIO()),
        logger=LoggingOrchestrator("test_logger"),
    )
    # demo ids collide with the preloaded record
    manager.add_employee("Zed", 101, 1.0)

    status = run_cli_demo(manager)

    assert status == 0
    assert manager.notifier.sent_messages[-1] == "Error: Employee ID 101 already exists."
    assert len(manager) == 1


def test_simulation_records_are_unique_and_valid() -> None:
    records = build_employee_records(total=100, seed=42)

    assert len(records) == 100
    assert len({employee_id for _name, employee_id, _salary in records}) == 100
    assert all(employee_id > 0 and salary >= 0 for _name, employee_id, salary in records)
    assert records == build_employee_records(total=100, seed=42)
    assert [row[1] for row in DEMO_EMPLOYEES_TABLE] == [101, 102, 103, 104, 105]


def test_cli_demo_runs_against_an_empty_injected_manager() -> None:
    stream = io.StringIO()
    manager = EmployeeManager(
        notifier=ConsoleNotifier(stream),
        logger=LoggingOrchestrator("test_logger"),
    )

    status = run_cli_demo(manager)

    assert status == 0
    assert manager.employee_ids() == [101, 102, 103, 105]
    assert manager.find_employee_by_id(102).salary == 6200.0
    assert "Employee with ID 104 removed." in stream.getvalue().splitlines()
