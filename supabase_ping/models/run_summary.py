"""Run summary model."""

from typing import List

from pydantic import BaseModel, Field

from supabase_ping.models.probe_result import ProbeOutcome


class RunSummary(BaseModel):
    """Counters for one run over the target list."""

    success_count: int = Field(0, description="Targets that answered")
    fail_count: int = Field(0, description="Targets that failed")
    total: int = Field(0, description="Number of targets in the list")
    outcomes: List[ProbeOutcome] = Field(
        default_factory=list, description="Outcomes in probe order"
    )

    def record(self, outcome: ProbeOutcome) -> None:
        """Count an outcome as a success or a failure.

        Args:
            outcome: The outcome of one probe.
        """
        self.outcomes.append(outcome)
        if outcome.passed:
            self.success_count += 1
        else:
            self.fail_count += 1

    @property
    def all_passed(self) -> bool:
        return self.fail_count == 0
