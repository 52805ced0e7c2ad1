"""Sequential study plan generation, one remote call per subject."""
import logging
from typing import Callable, Iterable, Iterator, Optional

from learnify.models.plan import PlanResult
from learnify.tools.prompts import DEFAULT_LANGUAGE, build_plan_prompt, format_subject_failure

logger = logging.getLogger(__name__)


def iter_plans(
    subjects: Iterable[str],
    generate: Callable[[str], str],
    language: str = DEFAULT_LANGUAGE,
    should_stop: Optional[Callable[[], bool]] = None,
) -> Iterator[PlanResult]:
    """
    Yield one PlanResult per subject, in input order.

    Each call to `generate` finishes before the next subject starts, so at most
    one request is in flight. A failing call never ends the loop: its subject
    gets a fallback message instead and processing moves on. Calls are not retried.

    Args:
        subjects: Subject names, processed in order
        generate: Remote call taking the prompt and returning generated text
        language: Language of the prompt template and fallback messages
        should_stop: Optional check run before each subject; returning True
            ends the loop early (the request in flight is never interrupted)
    """
    for subject in subjects:
        if should_stop is not None and should_stop():
            logger.info("Plan generation stopped before %s", subject)
            return

        prompt = build_plan_prompt(subject, language)
        logger.debug("Prompt for %s:\n%s", subject, prompt)

        try:
            content = generate(prompt)
        except Exception as e:
            logger.error(f"Error generating plan for {subject}: {e}")
            yield PlanResult(
                subject=subject,
                content=format_subject_failure(subject, e, language),
                failed=True,
            )
            continue

        logger.info(f"✓ Plan generated for {subject}")
        yield PlanResult(subject=subject, content=content)


def generate_plans(
    subjects: Iterable[str],
    generate: Callable[[str], str],
    language: str = DEFAULT_LANGUAGE,
    progress_callback: Optional[Callable[[PlanResult], None]] = None,
    should_stop: Optional[Callable[[], bool]] = None,
) -> list[PlanResult]:
    """Run the loop to completion and return the accumulated results."""
    results: list[PlanResult] = []
    for result in iter_plans(subjects, generate, language=language, should_stop=should_stop):
        results.append(result)
        if progress_callback:
            progress_callback(result)
    return results
