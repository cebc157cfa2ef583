"""
Console Report

Human-readable rendering of benchmark results.
"""

import sys
from typing import List, Optional, TextIO

from .models import AlgorithmResult, BenchmarkReport

SEPARATOR_WIDTH = 15
TRAILING_WIDTH = 14
FOOTER_WIDTH = 29


def _header(title: str) -> str:
    return f"{'-' * SEPARATOR_WIDTH}{title}{'-' * TRAILING_WIDTH}"


def format_result(result: AlgorithmResult) -> List[str]:
    """Format the verdict and timing lines for one algorithm."""
    if not result.is_prime:
        verdict = f"{result.number} is composite."
    elif result.probabilistic:
        verdict = f"{result.number} is probably prime."
    else:
        verdict = f"{result.number} is prime."

    return [
        _header(result.algorithm),
        verdict,
        f"Execution time {result.algorithm}: {result.elapsed_ms} ms",
    ]


def format_report(report: BenchmarkReport) -> str:
    lines: List[str] = []
    for result in report.results:
        lines.extend(format_result(result))
    lines.append("-" * FOOTER_WIDTH)
    return "\n".join(lines)


def print_report(report: BenchmarkReport, stream: Optional[TextIO] = None) -> None:
    """Write the formatted report to stream (stdout by default)."""
    print(format_report(report), file=stream or sys.stdout)
