"""Study plan result models."""
from pydantic import BaseModel, ConfigDict, Field


class PlanResult(BaseModel):
    """Generated study plan (or fallback message) for one subject."""
    model_config = ConfigDict(frozen=True)

    subject: str
    content: str  # markdown plan, or the fallback message when failed
    failed: bool = False


class StudyPlanReport(BaseModel):
    """Complete outcome of one planning request."""
    generated_at: str  # ISO timestamp
    model: str | None = None
    language: str = "id"
    subjects: list[str] = Field(default_factory=list)
    plans: list[PlanResult] = Field(default_factory=list)
    error: str | None = None  # top-level error; plans stay empty when set

    @property
    def failed_subjects(self) -> list[str]:
        return [plan.subject for plan in self.plans if plan.failed]

    @property
    def succeeded_count(self) -> int:
        return sum(1 for plan in self.plans if not plan.failed)
