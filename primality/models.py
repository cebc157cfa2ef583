"""
Pydantic Models for Benchmark Results

Records handed from the driver to the presentation layer.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator

TRIAL_DIVISION = "BruteForce"
MILLER_RABIN = "Miller"

PROBABILISTIC_ALGORITHMS = {MILLER_RABIN}


class AlgorithmResult(BaseModel):
    """Outcome and duration of one primality test run."""
    algorithm: str = Field(..., description="Algorithm label")
    number: int = Field(..., description="Tested integer")
    is_prime: bool = Field(..., description="Test verdict")
    elapsed_ms: float = Field(..., ge=0, description="Wall-clock time in milliseconds")

    @field_validator('algorithm')
    @classmethod
    def validate_algorithm(cls, v):
        if not v or not v.strip():
            raise ValueError('algorithm cannot be empty')
        return v.strip()

    @property
    def probabilistic(self) -> bool:
        return self.algorithm in PROBABILISTIC_ALGORITHMS


class BenchmarkReport(BaseModel):
    """All algorithm results for one input."""
    number: int = Field(..., description="Tested integer")
    iterations: int = Field(..., ge=0, description="Miller-Rabin witness count")
    results: List[AlgorithmResult] = Field(default_factory=list)

    @property
    def agree(self) -> bool:
        """True when every algorithm returned the same verdict."""
        return len({r.is_prime for r in self.results}) <= 1
