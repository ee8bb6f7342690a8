"""Generational search engine for GenString."""

from .engine import EvolutionEngine, GenerationHistory, SearchResult  # noqa: F401
from .report import ConsoleReporter, GenerationReport, LoggingReporter, format_report  # noqa: F401

__all__ = [
    'EvolutionEngine',
    'GenerationHistory',
    'SearchResult',
    'GenerationReport',
    'ConsoleReporter',
    'LoggingReporter',
    'format_report',
]
