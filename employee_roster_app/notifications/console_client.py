from __future__ import annotations

import sys
from typing import TextIO


class ConsoleNotifier:
    """Writes roster messages to a text stream and keeps a copy of each line."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.sent_messages: list[str] = []

    def send(self, message: str) -> None:
        self.sent_messages.append(message)
        stream = self._stream if self._stream is not None else sys.stdout
        print(message, file=stream)
