"""Kickoff pipeline - ordered provisioning steps with rollback.

Re-exports the Pipeline, its result types, and the fatal error
hierarchy.
"""

from kickoff.pipeline.compensation import CompensationStack
from kickoff.pipeline.errors import (
    ProjectConflictError,
    ProvisionError,
    ProvisionInterrupted,
    ProvisioningError,
    UsageError,
)
from kickoff.pipeline.result import ProvisionResult, StepOutcome, StepStatus
from kickoff.pipeline.runner import Pipeline, validate_project_name

__all__ = [
    "CompensationStack",
    "Pipeline",
    "ProjectConflictError",
    "ProvisionError",
    "ProvisionInterrupted",
    "ProvisionResult",
    "ProvisioningError",
    "StepOutcome",
    "StepStatus",
    "UsageError",
    "validate_project_name",
]
