"""Run a planning request against a PlannerSession."""
import logging
from datetime import datetime, timezone
from functools import partial
from typing import Callable, Optional

from learnify.models.plan import PlanResult, StudyPlanReport
from learnify.models.session import PlannerSession
from learnify.tools.gemini_client import init_generator
from learnify.tools.plan_generation import iter_plans
from learnify.tools.prompts import DEFAULT_LANGUAGE, format_fatal_error

logger = logging.getLogger(__name__)


class PlannerBusyError(RuntimeError):
    """Raised when a request is submitted while another one is running."""


def submit_plan(
    session: PlannerSession,
    subjects: Optional[list[str]] = None,
    generator_factory: Optional[Callable] = None,
    language: str = DEFAULT_LANGUAGE,
    progress_callback: Optional[Callable[[PlanResult], None]] = None,
    on_complete: Optional[Callable[[PlannerSession], None]] = None,
) -> list[PlanResult]:
    """
    Generate a plan for every subject and collect the results on the session.

    `generator_factory` is called once before any subject is processed and
    must return (generator, error); it defaults to `init_generator` in the
    requested language. An error there is fatal: it is stored on
    `session.error`, no remote calls are made and no plans are produced.
    Failures of individual subjects become fallback plans instead.

    `on_complete` runs whether the request succeeded, partly failed or
    failed before it started.

    Returns:
        The plans accumulated on the session (empty on fatal error)
    """
    if session.loading:
        raise PlannerBusyError("A planning request is already running")

    subjects = list(session.subjects if subjects is None else subjects)
    if not subjects:
        logger.info("No subjects selected; nothing to plan")
        return []

    session.loading = True
    session.clear_results()
    session.submitted = subjects
    if generator_factory is None:
        generator_factory = partial(init_generator, language=language)

    try:
        generate, error = generator_factory()
        if error:
            logger.error(f"Initialization error: {error}")
            session.error = format_fatal_error(error, language)
            return []

        logger.info(f"Generating study plans for {len(subjects)} subject(s)")
        for result in iter_plans(subjects, generate, language=language):
            session.plans.append(result)
            if progress_callback:
                progress_callback(result)
    finally:
        session.loading = False
        if on_complete:
            on_complete(session)

    return list(session.plans)


def build_report(
    session: PlannerSession,
    model: Optional[str] = None,
    language: str = DEFAULT_LANGUAGE,
) -> StudyPlanReport:
    """Snapshot the session into an exportable report."""
    return StudyPlanReport(
        generated_at=datetime.now(timezone.utc).isoformat(),
        model=model,
        language=language,
        subjects=list(session.submitted or session.subjects),
        plans=list(session.plans),
        error=session.error,
    )
