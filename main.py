from __future__ import annotations

import sys

from employee_roster_app.config import RuntimeConfig
from employee_roster_app.employee_manager import EmployeeManager
from employee_roster_app.exceptions import RosterError
from employee_roster_app.logging_orchestrator import LoggingOrchestrator
from employee_roster_app.notifications.console_client import ConsoleNotifier
from employee_roster_app.simulation import demo_employee_records


def bootstrap_manager(config: RuntimeConfig | None = None) -> EmployeeManager:
    if config is None:
        config = RuntimeConfig()
    return EmployeeManager(
        config=config,
        notifier=ConsoleNotifier(),
        logger=LoggingOrchestrator(config.logger_name),
    )


def run_cli_demo(manager: EmployeeManager | None = None) -> int:
    if manager is None:
        manager = bootstrap_manager()
    say = manager.notifier.send
    try:
        for name, employee_id, salary in demo_employee_records():
            manager.add_employee(name, employee_id, salary)

        say("\nAll Employees:")
        manager.print_all_employees()

        say(f"\nAverage Salary: {manager.config.currency_symbol}{manager.calculate_average_salary():g}")

        say("\nUpdating salary for Bob...")
        manager.update_salary(102, 6200.0)

        say("\nDisplaying top 3 salaries:")
        manager.display_top_salaries(3)

        say("\nFinding Employee with ID 103:")
        manager.find_employee_by_id(103)

        say("\nRemoving Employee with ID 104:")
        manager.remove_employee(104)

        say("\nAll Employees after removal:")
        manager.print_all_employees()
    except RosterError as exc:
        say(f"Error: {exc}")

    return 0


if __name__ == "__main__":
    sys.exit(run_cli_demo())
