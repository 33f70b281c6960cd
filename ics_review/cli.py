#!/usr/bin/env python3
"""ICS Review CLI - score, validate and export ICS forms from the command line.

Usage:
    ics-review evaluate scores.json              # Breakdown, status and rejection suggestions
    ics-review evaluate form.json --json         # Machine-readable result
    ics-review export forms.json --status APPROVED --output approved.csv
    ics-review catalog                           # Print the scoring catalog as JSON
    ics-review --catalog my_catalog.yaml evaluate scores.json

``evaluate`` accepts either a bare scores mapping or a form object with a
``scores`` key. ``export`` accepts a list of forms or an API list response
(``{"items": [...]}``).

Exit codes: 0 qualified / success, 1 not qualified, 2 invalid input.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ics_review.export import generate_csv_content, generate_filename
from ics_review.schemas.enums import IcsFormStatus
from ics_review.schemas.forms import IcsForm, IcsFormFilters
from ics_review.schemas.scores import ScoresRecord
from ics_review.scorers.catalog import CatalogError, ScoringCatalog, load_catalog
from ics_review.scorers.qualification import (
    get_score_breakdown,
    get_score_percentage,
    get_score_status,
)
from ics_review.scorers.rejection import generate_rejection_suggestions
from ics_review.utils.logger import configure_logging
from ics_review.validators.consistency_validator import check_csm_testnet
from ics_review.validators.record_validator import validate_scores_record

console = Console()
logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_QUALIFIED = 1
EXIT_INVALID_INPUT = 2


class InputError(Exception):
    """Raised when an input file cannot be read or parsed."""


def load_json_file(path: Path) -> Any:
    """Read and decode a JSON file."""
    if not path.exists():
        raise InputError(f"File not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InputError(f"Failed to parse {path}: {e}") from e
    except OSError as e:
        raise InputError(f"Failed to read {path}: {e}") from e


def evaluate_scores(scores: ScoresRecord, catalog: ScoringCatalog) -> dict[str, Any]:
    """Run the full engine over one record and collect serializable results."""
    breakdown = get_score_breakdown(scores, catalog)
    return {
        "breakdown": breakdown.model_dump(by_alias=True, mode="json"),
        "status": get_score_status(breakdown).model_dump(by_alias=True, mode="json"),
        "percentage": get_score_percentage(breakdown.total_score, catalog),
        "csmTestnet": check_csm_testnet(scores).model_dump(by_alias=True, mode="json"),
        "validation": validate_scores_record(scores, catalog).to_dict(),
        "rejectionSuggestions": [
            suggestion.model_dump(by_alias=True, mode="json")
            for suggestion in generate_rejection_suggestions(scores, catalog)
        ],
    }


def print_evaluation(result: dict[str, Any]) -> None:
    """Print an evaluation result with rich formatting."""
    breakdown = result["breakdown"]
    status = result["status"]

    table = Table(title="Score Breakdown")
    table.add_column("Category", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Min", justify="right")
    table.add_column("Raw", justify="right")
    table.add_column("Status", justify="center")

    for group in breakdown["groups"]:
        meets_min = group["cappedScore"] >= group["minLimit"]
        raw = f"{group['rawScore']} (capped)" if group["rawScore"] > group["maxLimit"] else str(group["rawScore"])
        table.add_row(
            group["groupTitle"],
            f"{group['cappedScore']}/{group['maxLimit']}",
            str(group["minLimit"]),
            raw,
            "[green]OK[/green]" if meets_min else "[red]BELOW MIN[/red]",
        )
    console.print(table)

    color = status["color"]
    summary = (
        f"Total: {breakdown['totalScore']} ({result['percentage']}% of maximum)\n"
        f"Required: {breakdown['threshold']}\n"
        f"[{color}]{status['message']}[/{color}]"
    )
    console.print(Panel(summary, title="Qualification", border_style=color))

    issues = result["validation"]["errors"] + result["validation"]["warnings"]
    if issues:
        console.print("[bold]Score issues[/bold]")
        for issue in issues:
            severity_color = "red" if issue["severity"] == "error" else "yellow"
            console.print(
                f"  [{severity_color}]{issue['severity'].upper()}[/{severity_color}] "
                f"{issue['itemId']}: {issue['message']}"
            )

    if result["rejectionSuggestions"]:
        console.print("[bold]Suggested rejection reasons[/bold]")
        for suggestion in result["rejectionSuggestions"]:
            console.print(f"  - {suggestion['text']} [dim]({suggestion['description']})[/dim]")


def cmd_evaluate(args: argparse.Namespace, catalog: ScoringCatalog) -> int:
    """Evaluate a single scores record."""
    raw = load_json_file(args.path)
    if isinstance(raw, dict) and isinstance(raw.get("scores"), dict):
        raw = raw["scores"]

    scores = ScoresRecord.model_validate(raw)
    result = evaluate_scores(scores, catalog)

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        print_evaluation(result)

    return EXIT_OK if result["breakdown"]["isQualified"] else EXIT_NOT_QUALIFIED


def _parse_bool(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    return value == "true"


def cmd_export(args: argparse.Namespace, catalog: ScoringCatalog) -> int:
    """Export forms to CSV."""
    raw = load_json_file(args.path)
    if isinstance(raw, dict):
        raw = raw.get("items", [])
    if not isinstance(raw, list):
        raise InputError(f"Expected a list of forms in {args.path}")

    forms = [IcsForm.model_validate(item) for item in raw]
    if not forms:
        console.print("[yellow]No forms to export[/yellow]")
        return EXIT_OK

    filters = IcsFormFilters(
        status=args.status,
        address=args.address,
        issued=_parse_bool(args.issued),
        outdated=_parse_bool(args.outdated),
        start_date=args.start_date,
        end_date=args.end_date,
    )
    output = args.output or Path(generate_filename(filters))
    try:
        output.write_text(generate_csv_content(forms, catalog) + "\n", encoding="utf-8")
    except OSError as e:
        raise InputError(f"Failed to write {output}: {e}") from e

    logger.info(f"Exported {len(forms)} forms to {output}")
    console.print(f"Exported {len(forms)} forms to [cyan]{output}[/cyan]")
    return EXIT_OK


def cmd_catalog(args: argparse.Namespace, catalog: ScoringCatalog) -> int:
    """Print the scoring catalog as JSON."""
    print(json.dumps(catalog.to_dict(), indent=2))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ics-review", description="Score and export ICS forms")
    parser.add_argument(
        "--catalog",
        type=Path,
        help="Scoring catalog file (default: ICS_SCORE_CATALOG or the bundled catalog)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    evaluate = subparsers.add_parser("evaluate", help="Score a single scores record or form")
    evaluate.add_argument("path", type=Path, help="JSON file with a scores mapping or a form")
    evaluate.add_argument("--json", action="store_true", help="Print machine-readable JSON")
    evaluate.set_defaults(handler=cmd_evaluate)

    export = subparsers.add_parser("export", help="Export forms to CSV")
    export.add_argument("path", type=Path, help="JSON file with a list of forms or an API list response")
    export.add_argument("--output", "-o", type=Path, help="Output CSV path (default: generated filename)")
    export.add_argument(
        "--status",
        choices=[status.value for status in IcsFormStatus],
        help="Status filter the forms were fetched with (used to name the file)",
    )
    export.add_argument("--address", help="Address filter the forms were fetched with")
    export.add_argument("--issued", choices=["true", "false"], help="Issued filter the forms were fetched with")
    export.add_argument("--outdated", choices=["true", "false"], help="Outdated filter the forms were fetched with")
    export.add_argument("--start-date", help="Start date filter (YYYY-MM-DD)")
    export.add_argument("--end-date", help="End date filter (YYYY-MM-DD)")
    export.set_defaults(handler=cmd_export)

    catalog = subparsers.add_parser("catalog", help="Print the scoring catalog as JSON")
    catalog.set_defaults(handler=cmd_catalog)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    # stdout carries command output only
    configure_logging(args.log_level, stream=sys.stderr)

    try:
        catalog = load_catalog(args.catalog)
        return args.handler(args, catalog)
    except (InputError, CatalogError, ValidationError) as e:
        logger.error(f"Invalid input: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return EXIT_INVALID_INPUT


if __name__ == "__main__":
    sys.exit(main())
