from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class StepStatus(str, Enum):
    SUCCEEDED = "succeeded"
    FAILED    = "failed"
    SKIPPED   = "skipped"
    NOOP      = "noop"


@dataclass
class StepResult:
    step: str
    status: StepStatus
    detail: str = ""
    error: Optional[BaseException] = None


@dataclass
class WorkflowReport:
    group_name: Optional[str]
    expected_steps: List[str]
    steps: List[StepResult] = field(default_factory=list)
    cleanup: Optional[StepResult] = None

    @property
    def succeeded(self) -> bool:
        """True only when every main-sequence step ran and succeeded."""
        if len(self.steps) != len(self.expected_steps):
            return False
        return all(s.status == StepStatus.SUCCEEDED for s in self.steps)

    @property
    def failed_step(self) -> Optional[StepResult]:
        return next((s for s in self.steps if s.status == StepStatus.FAILED), None)

