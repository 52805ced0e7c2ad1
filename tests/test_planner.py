"""Tests for learnify.tools.planner."""
import pytest

from learnify.models.session import PlannerSession
from learnify.tools.planner import PlannerBusyError, build_report, submit_plan


def _factory_for(generate):
    calls = []

    def factory():
        calls.append(1)
        return generate, None

    factory.calls = calls
    return factory


def test_submit_plan_collects_results_on_session() -> None:
    session = PlannerSession(subjects=["Mathematics", "Physics"])
    prompts: list[str] = []

    def generate(prompt: str) -> str:
        prompts.append(prompt)
        if "Physics" in prompt:
            raise TimeoutError("timeout")
        return "T1"

    plans = submit_plan(session, generator_factory=_factory_for(generate), language="en")

    assert [p.subject for p in plans] == ["Mathematics", "Physics"]
    assert plans[0].content == "T1"
    assert "Physics" in plans[1].content and "timeout" in plans[1].content
    assert session.plans == plans
    assert session.error is None
    assert session.loading is False


def test_fatal_error_makes_no_calls() -> None:
    session = PlannerSession(subjects=["Mathematics", "Physics"])
    calls: list[str] = []
    completed: list[PlannerSession] = []

    def factory():
        return None, "API key is not configured."

    plans = submit_plan(
        session,
        generator_factory=factory,
        language="en",
        progress_callback=lambda r: calls.append(r.subject),
        on_complete=completed.append,
    )

    assert plans == []
    assert session.plans == []
    assert session.error == "An error occurred: API key is not configured."
    assert calls == []
    assert completed == [session]
    assert session.loading is False


def test_no_subjects_is_noop() -> None:
    session = PlannerSession()
    factory = _factory_for(lambda prompt: "unused")
    assert submit_plan(session, generator_factory=factory) == []
    assert factory.calls == []


def test_explicit_subjects_override_session() -> None:
    session = PlannerSession(subjects=["Mathematics"])
    plans = submit_plan(session, subjects=["History"], generator_factory=_factory_for(lambda p: "ok"))
    assert [p.subject for p in plans] == ["History"]


def test_busy_session_rejects_submission() -> None:
    session = PlannerSession(subjects=["Mathematics"], loading=True)
    with pytest.raises(PlannerBusyError):
        submit_plan(session, generator_factory=_factory_for(lambda p: "ok"))


def test_session_is_busy_while_generating() -> None:
    session = PlannerSession(subjects=["Mathematics", "Physics"])
    states: list[bool] = []

    def generate(prompt: str) -> str:
        states.append(session.loading)
        return "plan"

    submit_plan(session, generator_factory=_factory_for(generate))

    assert states == [True, True]
    assert session.loading is False


def test_partial_results_visible_during_run() -> None:
    session = PlannerSession(subjects=["Mathematics", "Physics", "Chemistry"])
    counts: list[int] = []

    submit_plan(
        session,
        generator_factory=_factory_for(lambda p: "plan"),
        progress_callback=lambda r: counts.append(len(session.plans)),
    )

    assert counts == [1, 2, 3]


def test_resubmission_clears_previous_results() -> None:
    session = PlannerSession(subjects=["Mathematics"])
    submit_plan(session, generator_factory=lambda: (None, "broken"))
    assert session.error

    submit_plan(session, generator_factory=_factory_for(lambda p: "plan"))

    assert session.error is None
    assert len(session.plans) == 1


def test_build_report() -> None:
    session = PlannerSession(subjects=["Mathematics", "Physics"])

    def generate(prompt: str) -> str:
        if "Physics" in prompt:
            raise ValueError("bad")
        return "ok"

    submit_plan(session, generator_factory=_factory_for(generate))

    report = build_report(session, model="gemini-2.5-flash", language="id")

    assert report.subjects == ["Mathematics", "Physics"]
    assert report.failed_subjects == ["Physics"]
    assert report.succeeded_count == 1
    assert report.error is None


def test_default_factory_uses_requested_language(monkeypatch) -> None:
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    session = PlannerSession(subjects=["Physics"])

    plans = submit_plan(session, language="en")

    assert plans == []
    assert session.error == (
        "An error occurred: API key is not configured. "
        "Make sure the GOOGLE_API_KEY environment variable is set."
    )


def test_report_lists_submitted_subjects() -> None:
    session = PlannerSession(subjects=["Mathematics"])
    submit_plan(session, subjects=["History", "Biology"], generator_factory=_factory_for(lambda p: "ok"))

    report = build_report(session)

    assert report.subjects == ["History", "Biology"]
    assert [p.subject for p in report.plans] == report.subjects
