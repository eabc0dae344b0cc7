from __future__ import annotations


class CommandError(ValueError):
    """A command line that cannot be parsed or executed; carries its 1-based line number."""

    def __init__(self, line: int, reason: str = '') -> None:
        super().__init__(reason or f'invalid command in line {line}')
        self.line = line
        self.reason = reason

    def report(self) -> str:
        return f'ERROR {self.line}'
