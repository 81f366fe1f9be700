"""Verdict derivation and process exit codes."""

from enum import Enum, IntEnum

from .comparison import ComparisonResult


class ExitCode(IntEnum):
    """Exit codes of the perfgate command line"""
    SUCCESS = 0   # No regression (pass or improvement)
    FAILURE = 1   # Performance regression detected
    ERROR = 2     # No comparison could be made


class Verdict(Enum):
    """Outcome of a comparison"""
    REGRESSION = "regression"
    IMPROVEMENT = "improvement"
    NO_CHANGE = "no-change"

    @property
    def exit_code(self) -> ExitCode:
        if self is Verdict.REGRESSION:
            return ExitCode.FAILURE
        return ExitCode.SUCCESS

    @property
    def is_failure(self) -> bool:
        return self is Verdict.REGRESSION


def verdict(result: ComparisonResult) -> Verdict:
    """Map a comparison result to regression, improvement or no-change."""
    if result.is_regression:
        return Verdict.REGRESSION
    if result.is_improvement:
        return Verdict.IMPROVEMENT
    return Verdict.NO_CHANGE


__all__ = ["ExitCode", "Verdict", "verdict"]
