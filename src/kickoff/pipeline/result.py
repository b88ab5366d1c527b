"""Run result model for a provisioning pipeline run.

Plain dataclasses: a ProvisionResult collects one StepOutcome per
step that ran, plus the fatal error (if any) that ended the run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from kickoff.pipeline.errors import ProvisionError


class StepStatus(str, Enum):
    """Outcome of a single pipeline step."""

    OK = "ok"
    WARNING = "warning"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class StepOutcome:
    """What happened in one step."""

    step: str
    status: StepStatus
    detail: str = ""


@dataclass
class ProvisionResult:
    """Summary of a whole provisioning run.

    A run is successful when no fatal error occurred, even if some
    non-fatal steps produced warnings or failed.
    """

    project_name: str
    root: Path | None = None
    steps: list[StepOutcome] = field(default_factory=list)
    error: ProvisionError | None = None
    rolled_back: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        return 0 if self.error is None else self.error.exit_code

    @property
    def warnings(self) -> list[StepOutcome]:
        """Non-fatal problems recorded during the run."""
        return [
            s for s in self.steps if s.status in (StepStatus.WARNING, StepStatus.FAILED)
        ]

    def outcome(self, step: str) -> StepOutcome | None:
        """Return the outcome recorded for step, or None if it never ran."""
        for s in self.steps:
            if s.step == step:
                return s
        return None

    def record(self, step: str, status: StepStatus, detail: str = "") -> StepOutcome:
        """Append and return a new StepOutcome."""
        outcome = StepOutcome(step=step, status=status, detail=detail)
        self.steps.append(outcome)
        return outcome
