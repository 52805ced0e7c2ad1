"""Planner session state owned by the caller."""
from pydantic import BaseModel, Field

from learnify.models.plan import PlanResult


class PlannerSession(BaseModel):
    """Subjects chosen by the user plus the results of the last request."""
    subjects: list[str] = Field(default_factory=list)
    plans: list[PlanResult] = Field(default_factory=list)
    loading: bool = False  # busy while a request is running
    error: str | None = None
    submitted: list[str] = Field(default_factory=list)  # subjects of the last request

    def add_subject(self, name: str) -> bool:
        """Append a subject unless it is blank or already present."""
        name = name.strip()
        if not name or name in self.subjects:
            return False
        self.subjects.append(name)
        return True

    def remove_subject(self, name: str) -> bool:
        """Remove a subject; unknown names are ignored."""
        if name not in self.subjects:
            return False
        self.subjects.remove(name)
        return True

    def clear_results(self) -> None:
        self.plans = []
        self.error = None
        self.submitted = []
