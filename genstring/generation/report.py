"""Generation reports and the reporters that display them."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Callable, TextIO

# ANSI: cursor home + erase display
CLEAR_SCREEN = "\033[H\033[2J"


@dataclass(frozen=True)
class GenerationReport:
    """Snapshot of the best genotype of one generation."""

    generation: int
    target: str
    diff: str
    best: str
    score: float

    @property
    def found(self) -> bool:
        return self.best == self.target


Reporter = Callable[[GenerationReport], None]


def format_report(report: GenerationReport, precision: int = 6) -> str:
    prefix = f"gen: {report.generation:6d}"
    return "\n".join([
        f"{prefix} {report.target}",
        f"{prefix} {report.diff}",
        f"{prefix} {report.best} {report.score:.{precision}f}",
    ]) + "\n"


class ConsoleReporter:
    """Writes each report to a terminal stream, optionally clearing it first."""

    def __init__(self, stream: TextIO | None = None, clear_screen: bool = True, precision: int = 6) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.clear_screen = clear_screen
        self.precision = precision

    def __call__(self, report: GenerationReport) -> None:
        if self.clear_screen:
            self.stream.write(CLEAR_SCREEN)
        self.stream.write(format_report(report, self.precision))
        self.stream.write("\n")
        self.stream.flush()


class LoggingReporter:
    """Routes reports through ``logging`` instead of a terminal."""

    def __init__(self, level: int = logging.INFO, precision: int = 6) -> None:
        self.level = level
        self.precision = precision

    def __call__(self, report: GenerationReport) -> None:
        logging.log(
            self.level,
            f"gen={report.generation} best={report.best!r} score={report.score:.{self.precision}f} diff={report.diff!r}",
        )


__all__ = [
    "GenerationReport",
    "Reporter",
    "format_report",
    "ConsoleReporter",
    "LoggingReporter",
]
