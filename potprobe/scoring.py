"""Turn probe results into probabilities and a printed report."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from potprobe.probe import CheckResult

_SEPARATOR = "-------------------------------------"


@dataclass(frozen=True)
class Result:
    """One report line: what was checked, what was seen and how likely a honeypot is."""

    description: str
    details: str
    probability: float


def to_result(check: CheckResult) -> Result:
    """Convert a probe result into a report entry."""
    return Result(description=check.name, details=check.details, probability=float(check.score))


def calculate_overall_probability(results: Sequence[Result]) -> float:
    """Average the probabilities of ``results``; zero when there are none."""
    if not results:
        return 0.0
    return sum(result.probability for result in results) / len(results)


def format_report(results: Sequence[Result], overall_probability: float) -> str:
    """Render the report as text, one line per result plus the overall verdict."""
    lines = ["Results"]
    lines.extend(
        f"{result.description} - {result.details} | "
        f"{result.probability:.0f}% the probability that this honeypot"
        for result in results
    )
    lines.append(_SEPARATOR)
    lines.append(f"Final Honeypot Probability: {overall_probability:.0f}%")
    return "\n".join(lines) + "\n"


def print_report(results: Sequence[Result], overall_probability: float) -> None:
    """Print the report to standard output."""
    print(format_report(results, overall_probability), end="")