"""Pod status parser - buckets raw pod status strings into phase counts."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from kubedash.constants.enums import PodPhase


@dataclass(frozen=True)
class PodStatusTally:
    """Pod counts per phase, rebuilt on every classification pass."""

    running: int = 0
    pending: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.running + self.pending + self.failed

    def as_dict(self) -> dict[str, int]:
        return {
            PodPhase.RUNNING.value: self.running,
            PodPhase.PENDING.value: self.pending,
            PodPhase.FAILED.value: self.failed,
        }


class PodStatusParser:
    """Parses raw pod status strings into a ``PodStatusTally``."""

    # Checked in order; the first phase with a matching token wins
    _PHASE_TOKENS: tuple[tuple[PodPhase, tuple[str, ...]], ...] = (
        (PodPhase.RUNNING, ("running",)),
        (PodPhase.PENDING, ("pending",)),
        (PodPhase.FAILED, ("failed", "error")),
    )

    def __init__(self) -> None:
        """Initialize pod status parser."""
        pass

    def phase_of(self, status: str) -> PodPhase | None:
        """Return the phase for one status string, or None if it matches none.

        Matching is a case-insensitive substring test, so
        ``"Failed: OOMKilled"`` counts as failed while statuses such as
        ``"CrashLoopBackOff"`` or ``"Succeeded"`` belong to no phase.
        """
        lowered = status.lower()
        for phase, tokens in self._PHASE_TOKENS:
            if any(token in lowered for token in tokens):
                return phase
        return None

    def classify(self, statuses: Iterable[str]) -> PodStatusTally:
        """Count statuses per phase; unmatched statuses are not counted.

        Args:
            statuses: Raw status strings as reported by the API

        Returns:
            A new PodStatusTally.
        """
        counts = dict.fromkeys(PodPhase, 0)
        for status in statuses:
            phase = self.phase_of(status)
            if phase is not None:
                counts[phase] += 1
        return PodStatusTally(
            running=counts[PodPhase.RUNNING],
            pending=counts[PodPhase.PENDING],
            failed=counts[PodPhase.FAILED],
        )


__all__ = [
    "PodStatusParser",
    "PodStatusTally",
]
