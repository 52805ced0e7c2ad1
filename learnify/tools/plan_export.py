"""Export study plan reports to Markdown or JSON."""
from pathlib import Path

from learnify.models.plan import StudyPlanReport

MARKDOWN_SUFFIXES = (".md", ".markdown")
JSON_SUFFIXES = (".json",)
EXPORT_SUFFIXES = MARKDOWN_SUFFIXES + JSON_SUFFIXES


def render_markdown(report: StudyPlanReport) -> str:
    """Join every plan into one Markdown document."""
    if report.error:
        return f"> {report.error}\n"

    sections = [plan.content.strip() for plan in report.plans]
    return "\n\n---\n\n".join(sections) + "\n"


def export_to_markdown(report: StudyPlanReport, out_path: Path) -> None:
    _write_atomic(out_path, render_markdown(report))


def export_to_json(report: StudyPlanReport, out_path: Path) -> None:
    _write_atomic(out_path, report.model_dump_json(indent=2))


def export_report(report: StudyPlanReport, out_path: Path) -> None:
    """Write the report in the format matching the file suffix (.md, .markdown, .json)."""
    suffix = out_path.suffix.lower()
    if suffix in MARKDOWN_SUFFIXES:
        export_to_markdown(report, out_path)
    elif suffix in JSON_SUFFIXES:
        export_to_json(report, out_path)
    else:
        raise ValueError(f"Unsupported export format '{suffix}' (use .md or .json)")


def _write_atomic(out_path: Path, text: str) -> None:
    """Write to a temp file first, then replace the target."""
    out_path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = out_path.with_suffix(out_path.suffix + ".tmp")
    temp_path.write_text(text, encoding="utf-8")
    temp_path.replace(out_path)
