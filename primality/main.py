"""
Primality Benchmark Entry Point

Runs trial division and Miller-Rabin on the configured number, times
each run, and prints the report.
"""

import logging
import random
import sys
from typing import Optional

from pydantic import ValidationError

from .config import Settings, get_settings
from .errors import PrimalityError
from .logging_config import setup_logging
from .miller_rabin import is_probable_prime
from .models import MILLER_RABIN, TRIAL_DIVISION, AlgorithmResult, BenchmarkReport
from .report import print_report
from .timing import timed
from .trial_division import is_prime_trial_division

logger = logging.getLogger(__name__)


def run_benchmark(number: int, iterations: int, rng: Optional[random.Random] = None) -> BenchmarkReport:
    """
    Run both primality tests once on number.

    Args:
        number: Integer to test
        iterations: Miller-Rabin witness count
        rng: Random source for Miller-Rabin witnesses, owned by this run

    Returns:
        BenchmarkReport: Verdict and elapsed time per algorithm
    """
    report = BenchmarkReport(number=number, iterations=iterations)

    verdict, elapsed_ms = timed(is_prime_trial_division, number)
    report.results.append(AlgorithmResult(
        algorithm=TRIAL_DIVISION, number=number, is_prime=verdict, elapsed_ms=elapsed_ms
    ))
    logger.info(f"{TRIAL_DIVISION}: {number} prime={verdict} in {elapsed_ms:.3f} ms")

    verdict, elapsed_ms = timed(is_probable_prime, number, iterations, rng or random.Random())
    report.results.append(AlgorithmResult(
        algorithm=MILLER_RABIN, number=number, is_prime=verdict, elapsed_ms=elapsed_ms
    ))
    logger.info(f"{MILLER_RABIN}: {number} prime={verdict} in {elapsed_ms:.3f} ms (k={iterations})")

    if not report.agree:
        logger.warning(f"Algorithms disagree on {number}")

    return report


def main(settings: Optional[Settings] = None) -> int:
    """Run the benchmark and print the report. Returns the exit status."""
    try:
        settings = settings or get_settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    setup_logging(settings)

    try:
        report = run_benchmark(settings.number, settings.iterations)
    except PrimalityError as e:
        logger.error(f"Benchmark failed: {e}")
        return 1

    print_report(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
