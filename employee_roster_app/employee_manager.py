from __future__ import annotations

from employee_roster_app.config import RuntimeConfig
from employee_roster_app.exceptions import EmptyCollection, InvalidArgument
from employee_roster_app.logging_orchestrator import LoggingOrchestrator
from employee_roster_app.models import Employee, SalaryRank
from employee_roster_app.notifications.console_client import ConsoleNotifier


class EmployeeManager:
    """In-memory roster kept as an insertion-ordered list plus an id lookup.

    Both views hold the same ``Employee`` objects, so an in-place salary update
    is visible through either of them.
    """

    def __init__(
        self,
        config: RuntimeConfig | None = None,
        notifier: ConsoleNotifier | None = None,
        logger: LoggingOrchestrator | None = None,
    ) -> None:
        self.config = config if config is not None else RuntimeConfig()
        self.notifier = notifier if notifier is not None else ConsoleNotifier()
        self.logger = logger if logger is not None else LoggingOrchestrator(self.config.logger_name)
        self._employees: list[Employee] = []
        self._employees_by_id: dict[int, Employee] = {}

    def __len__(self) -> int:
        return len(self._employees)

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._employees_by_id

    def all_employees(self) -> list[Employee]:
        return list(self._employees)

    def employee_ids(self) -> list[int]:
        return [employee.employee_id for employee in self._employees]

    def _money(self, amount: float) -> str:
        return f"{self.config.currency_symbol}{amount:g}"

    def _describe(self, employee: Employee) -> str:
        return (
            f"Name: {employee.name}, ID: {employee.employee_id}, "
            f"Salary: {self._money(employee.salary)}"
        )

    def add_employee(self, name: str, employee_id: int, salary: float) -> Employee:
        if employee_id <= 0 or salary < 0:
            self.logger.warning(
                f"Rejected employee name={name} employee_id={employee_id} salary={salary}."
            )
            raise InvalidArgument("Invalid ID or salary.")
        if employee_id in self._employees_by_id and not self.config.allow_duplicate_ids:
            self.logger.warning(f"Rejected duplicate employee_id={employee_id}.")
            raise InvalidArgument(f"Employee ID {employee_id} already exists.")

        employee = Employee(name=name, employee_id=employee_id, salary=float(salary))
        self._employees.append(employee)
        self._employees_by_id[employee_id] = employee
        self.logger.info(f"Employee {employee_id} ({name}) added with salary {salary:g}.")
        return employee

    def print_all_employees(self) -> list[str]:
        if not self._employees:
            lines = ["No employees to display."]
        else:
            lines = [self._describe(employee) for employee in self._employees]
        for line in lines:
            self.notifier.send(line)
        return lines

    def update_salary(self, employee_id: int, new_salary: float) -> Employee | None:
        employee = self._employees_by_id.get(employee_id)
        if employee is None:
            self.logger.warning(f"Salary update skipped, employee_id={employee_id} not found.")
            self.notifier.send("Employee not found.")
            return None
        if new_salary < 0:
            self.logger.warning(
                f"Rejected negative salary {new_salary:g} for employee_id={employee_id}."
            )
            raise InvalidArgument("Salary cannot be negative.")

        employee.salary = float(new_salary)
        self.logger.info(f"Salary of employee {employee_id} set to {new_salary:g}.")
        self.notifier.send(f"Updated salary for ID: {employee_id} to {self._money(new_salary)}")
        return employee

    def calculate_average_salary(self) -> float:
        if not self._employees:
            self.logger.warning("Average salary requested on an empty roster.")
            raise EmptyCollection("No employees to calculate average salary.")

        total = 0.0
        for employee in self._employees:
            total += employee.salary
        return total / len(self._employees)

    def remove_employee(self, employee_id: int) -> int:
        kept = [employee for employee in self._employees if employee.employee_id != employee_id]
        removed = len(self._employees) - len(kept)
        if not removed:
            self.logger.warning(f"Removal skipped, employee_id={employee_id} not found.")
            self.notifier.send("Employee not found.")
            return 0

        self._employees = kept
        self._employees_by_id.pop(employee_id, None)
        self.logger.info(f"Removed {removed} record(s) for employee_id={employee_id}.")
        self.notifier.send(f"Employee with ID {employee_id} removed.")
        return removed

    def display_top_salaries(self, n: int) -> list[SalaryRank]:
        if n <= 0:
            self.logger.warning(f"Rejected top salaries request n={n}.")
            self.notifier.send("Invalid number of top salaries requested.")
            return []

        # sorted() is stable, so equal salaries keep insertion order
        ranked = sorted(self._employees, key=lambda employee: employee.salary, reverse=True)
        rows = [
            SalaryRank(
                rank=index,
                name=employee.name,
                employee_id=employee.employee_id,
                salary=employee.salary,
            )
            for index, employee in enumerate(ranked[:n], start=1)
        ]
        for row in rows:
            self.notifier.send(f"{row.rank}. {row.name}: {self._money(row.salary)}")
        return rows

    def find_employee_by_id(self, employee_id: int) -> Employee | None:
        employee = self._employees_by_id.get(employee_id)
        if employee is None:
            self.notifier.send(f"Employee with ID {employee_id} not found.")
            return None
        self.notifier.send(f"Employee Found - {self._describe(employee)}")
        return employee
