from __future__ import annotations

import logging
from dataclasses import dataclass, field


@dataclass(slots=True)
class LoggingOrchestrator:
    logger_name: str = "employee_roster"
    level: int = logging.INFO
    logger: logging.Logger = field(init=False)

    def __post_init__(self) -> None:
        self.logger = logging.getLogger(self.logger_name)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(
                logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
            )
            self.logger.addHandler(handler)
            self.logger.setLevel(self.level)

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)
