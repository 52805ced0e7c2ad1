"""ADK tool wrappers for study plan generation.

Each tool returns a plain dict with a "status" key so the agent can report
results or errors back to the user.
"""
import logging

from learnify.models.session import PlannerSession
from learnify.settings import load_settings
from learnify.tools.gemini_client import init_generator
from learnify.tools.planner import submit_plan

logger = logging.getLogger(__name__)


def create_study_plans(subjects: list[str], language: str = "id") -> dict:
    """
    Generate a structured study plan (Markdown) for each subject.

    Args:
        subjects: Subject names, e.g. ["Mathematics", "Physics"]. Duplicates
            and blank names are ignored.
        language: "id" for Indonesian or "en" for English

    Returns:
        dict with:
        - status: "success" or "error"
        - plans: list of {subject, content, failed} in the order requested
        - failed_subjects: subjects whose plan could not be generated
        - message: summary message
    """
    try:
        settings = load_settings(language=language)
    except ValueError as e:
        return {
            "status": "error",
            "plans": [],
            "failed_subjects": [],
            "message": f"Invalid settings: {str(e)}"
        }

    session = PlannerSession()
    for subject in subjects:
        session.add_subject(subject)

    if not session.subjects:
        return {
            "status": "error",
            "plans": [],
            "failed_subjects": [],
            "message": "No subjects given. Provide at least one subject name."
        }

    def factory():
        return init_generator(
            api_key=settings.api_key,
            model_name=settings.model,
            temperature=settings.temperature,
            language=settings.language,
        )

    submit_plan(session, generator_factory=factory, language=settings.language)

    if session.error:
        return {
            "status": "error",
            "plans": [],
            "failed_subjects": [],
            "message": session.error
        }

    plans = [plan.model_dump() for plan in session.plans]
    failed = [plan.subject for plan in session.plans if plan.failed]
    logger.info(f"✅ Created {len(plans) - len(failed)}/{len(plans)} study plans")

    return {
        "status": "success",
        "plans": plans,
        "failed_subjects": failed,
        "message": f"Created {len(plans) - len(failed)} of {len(plans)} study plans."
        + (f" Failed: {', '.join(failed)}." if failed else "")
    }
