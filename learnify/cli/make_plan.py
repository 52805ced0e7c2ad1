"""CLI to generate study plans for one or more subjects."""
import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.markdown import Markdown
from rich.prompt import Prompt
from rich.rule import Rule
from rich.text import Text
from tqdm import tqdm

from learnify.models.session import PlannerSession
from learnify.settings import load_settings
from learnify.tools.gemini_client import init_generator
from learnify.tools.plan_export import EXPORT_SUFFIXES, export_report
from learnify.tools.planner import build_report, submit_plan
from learnify.tools.prompts import POPULAR_SUBJECTS, SUPPORTED_LANGUAGES, cli_message


console = Console()


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate structured study plans with Gemini"
    )
    parser.add_argument(
        "subjects",
        nargs="*",
        help="Subjects to plan (duplicates are ignored)"
    )
    parser.add_argument(
        "-i", "--interactive",
        action="store_true",
        help="Pick subjects interactively before generating"
    )
    parser.add_argument(
        "--popular",
        action="store_true",
        help="List popular subjects and exit"
    )
    parser.add_argument(
        "--lang",
        choices=SUPPORTED_LANGUAGES,
        default=None,
        help="Language for prompts and messages (default: PLANNER_LANGUAGE or 'id')"
    )
    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="Gemini model name (default: CHAT_MODEL or gemini-2.5-flash)"
    )
    parser.add_argument(
        "--temperature",
        type=float,
        default=None,
        help="Sampling temperature (0.0-2.0)"
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Save the plans to a .md or .json file"
    )
    parser.add_argument(
        "--no-render",
        action="store_true",
        help="Do not print the plans to the terminal"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (shows prompts and responses, very verbose)"
    )
    return parser.parse_args(argv)


def _configure_logging(args: argparse.Namespace) -> None:
    if args.debug:
        log_level = logging.DEBUG
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif args.verbose:
        log_level = logging.INFO
        log_format = "%(asctime)s - %(levelname)s - %(message)s"
    else:
        log_level = logging.WARNING
        log_format = "%(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def _show_popular(language: str) -> None:
    console.print(f"[bold]{cli_message('popular_header', language)}[/bold]")
    for index, subject in enumerate(POPULAR_SUBJECTS[language], start=1):
        console.print(f"  {index}. {subject}")


def _pick_subjects(session: PlannerSession, language: str) -> None:
    """
    Interactive subject picker.

    A name adds a subject, "-name" removes one, a number picks a popular
    subject and an empty line finishes.
    """
    popular = POPULAR_SUBJECTS[language]
    _show_popular(language)
    console.print(f"\n{cli_message('picker_help', language)}")
    console.print(f"{cli_message('picker_submit', language)}\n")

    while True:
        if session.subjects:
            selected = escape(", ".join(session.subjects))
            console.print(f"[cyan]{cli_message('selected', language, subjects=selected)}[/cyan]")
        entry = Prompt.ask(cli_message("picker_prompt", language), default="", show_default=False).strip()
        if not entry:
            return

        if entry.startswith("-"):
            name = entry[1:].strip()
            if not session.remove_subject(name):
                console.print(f"[yellow]{cli_message('not_selected', language, subject=escape(name))}[/yellow]")
            continue

        if entry.isdigit() and 1 <= int(entry) <= len(popular):
            entry = popular[int(entry) - 1]

        if not session.add_subject(entry):
            console.print(f"[yellow]{cli_message('already_selected', language, subject=escape(entry))}[/yellow]")


def main(argv=None):
    """Generate, render and optionally export study plans."""
    load_dotenv()
    args = _parse_args(argv)
    _configure_logging(args)

    try:
        settings = load_settings(model=args.model, language=args.lang, temperature=args.temperature)
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/red]")
        sys.exit(2)

    if args.output and args.output.suffix.lower() not in EXPORT_SUFFIXES:
        console.print(
            f"[red]Unsupported output format '{escape(args.output.suffix)}'[/red] "
            f"(use {', '.join(EXPORT_SUFFIXES)})"
        )
        sys.exit(2)

    language = settings.language

    if args.popular:
        _show_popular(language)
        return

    session = PlannerSession()
    for subject in args.subjects:
        session.add_subject(subject)

    if args.interactive:
        _pick_subjects(session, language)

    if not session.subjects:
        console.print(Text(cli_message("no_subjects", language), style="red"))
        sys.exit(2)

    console.print(f"{cli_message('creating', language, count=len(session.subjects))}\n")
    pbar = tqdm(total=len(session.subjects), desc="Generating plans", unit="subject")

    def progress_callback(result):
        pbar.set_postfix_str(result.subject[:40])
        pbar.update(1)

    def factory():
        return init_generator(
            api_key=settings.api_key,
            model_name=settings.model,
            temperature=settings.temperature,
            language=language,
        )

    submit_plan(
        session,
        generator_factory=factory,
        language=language,
        progress_callback=progress_callback,
        on_complete=lambda _: pbar.close(),
    )

    report = build_report(session, model=settings.model, language=language)

    if args.output:
        export_report(report, args.output)
        console.print(f"[green]{cli_message('saved', language, path=escape(str(args.output)))}[/green]")

    if report.error:
        console.print()
        console.print(Text(report.error, style="red"))
        sys.exit(1)

    if not args.no_render:
        for plan in report.plans:
            console.print(Rule(Text(plan.subject), style="red" if plan.failed else "blue"))
            if plan.failed:
                console.print(Text(plan.content, style="red"))
            else:
                console.print(Markdown(plan.content))
            console.print()

    done = cli_message("done", language, succeeded=report.succeeded_count, total=len(report.plans))
    console.print(f"[bold green]{done}[/bold green]")
    if report.failed_subjects:
        failed = escape(", ".join(report.failed_subjects))
        console.print(f"[yellow]⚠ {cli_message('failed', language, subjects=failed)}[/yellow]")


if __name__ == "__main__":
    main()
