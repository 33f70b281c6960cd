"""
Export - flatten reviewed ICS forms into CSV rows.

Each form becomes one row: form data, review metadata, one column per score
item (catalog order), ``totalScore`` and the reviewer comments.
``totalScore`` is always the capped engine total, identical to
``calculate_total_score``.

Usage:
    from ics_review.export import generate_csv_content, generate_filename

    content = generate_csv_content(forms, catalog)
    filename = generate_filename(IcsFormFilters(status="APPROVED"))
"""

import csv
import io
from datetime import date
from typing import Any, Optional

from ics_review.constants import (
    ADDRESS_FILTER_PREFIX_LENGTH,
    CSV_FILENAME_PREFIX,
    CSV_LIST_SEPARATOR,
)
from ics_review.schemas.forms import IcsForm, IcsFormFilters
from ics_review.schemas.scores import ScoresInput, as_score_mapping
from ics_review.scorers.aggregator import calculate_total_score
from ics_review.scorers.catalog import ScoringCatalog

TOTAL_SCORE_COLUMN = "totalScore"


def flatten_scores(scores: ScoresInput, catalog: ScoringCatalog) -> dict[str, Any]:
    """One column per catalog item (None when absent) plus the capped total."""
    mapping = as_score_mapping(scores)
    row: dict[str, Any] = {item_id.value: mapping.get(item_id.value) for item_id in catalog.item_ids}
    row[TOTAL_SCORE_COLUMN] = calculate_total_score(mapping, catalog)
    return row


def _join(values: Optional[list[Optional[str]]]) -> str:
    if not values:
        return ""
    return CSV_LIST_SEPARATOR.join(value or "" for value in values)


def flatten_ics_form(form: IcsForm, catalog: ScoringCatalog) -> dict[str, Any]:
    """Flatten a form into a single export row."""
    row: dict[str, Any] = {
        "id": form.id,
        # Form data
        "mainAddress": form.form.main_address,
        "twitterLink": form.form.twitter_link or "",
        "discordLink": form.form.discord_link or "",
        "additionalAddresses": _join(form.form.additional_addresses),
        # Status and metadata
        "status": form.status.value,
        "issued": form.issued,
        "outdated": form.outdated,
        "createdAt": form.created_at,
        "updatedAt": form.updated_at or "",
        "lastReviewer": form.last_reviewer or "",
    }
    row.update(flatten_scores(form.scores, catalog))
    row.update(
        {
            "reasonComment": form.comments.reason or "",
            "mainAddressComment": form.comments.main_address or "",
            "twitterLinkComment": form.comments.twitter_link or "",
            "discordLinkComment": form.comments.discord_link or "",
            "additionalAddressesComment": _join(form.comments.additional_addresses),
        }
    )
    return row


def _format_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def generate_csv_content(forms: list[IcsForm], catalog: ScoringCatalog) -> str:
    """Render forms as CSV text (header + one row per form, newline separated).

    Fields are quoted only when they contain a comma, a quote or a newline.
    Returns an empty string when there are no forms.
    """
    if not forms:
        return ""

    rows = [flatten_ics_form(form, catalog) for form in forms]
    headers = list(rows[0].keys())

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(headers)
    for row in rows:
        writer.writerow([_format_cell(row.get(header)) for header in headers])

    return buffer.getvalue().rstrip("\n")


def generate_filename(filters: Optional[IcsFormFilters] = None, today: Optional[date] = None) -> str:
    """Build an export filename describing the active filters.

    Example: ``ics-forms-approved-issued-addr-0xabcd-2025-01-01-to-2025-02-01-2025-03-15.csv``
    """
    filters = filters or IcsFormFilters()
    today = today or date.today()

    parts: list[str] = []
    if filters.status:
        parts.append(filters.status.value.lower())
    if filters.issued is not None:
        parts.append("issued" if filters.issued else "not-issued")
    if filters.outdated is not None:
        parts.append("outdated" if filters.outdated else "current")
    if filters.address:
        parts.append(f"addr-{filters.address[:ADDRESS_FILTER_PREFIX_LENGTH]}")

    if filters.start_date and filters.end_date:
        parts.append(f"{filters.start_date}-to-{filters.end_date}")
    elif filters.start_date:
        parts.append(f"from-{filters.start_date}")
    elif filters.end_date:
        parts.append(f"until-{filters.end_date}")

    filter_string = f"-{'-'.join(parts)}" if parts else ""
    return f"{CSV_FILENAME_PREFIX}{filter_string}-{today.isoformat()}.csv"
