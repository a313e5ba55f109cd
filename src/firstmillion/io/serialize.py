"""Serialization for inputs, summaries, and schedule export."""

from __future__ import annotations

import csv
import hashlib
import io
import json
from collections.abc import Sequence
from typing import Any

from firstmillion.analytics.metrics import return_on_investment
from firstmillion.config.schema import ProjectionInputs
from firstmillion.core.engine import MonthlySnapshot, SummaryStats


def compute_inputs_hash(inputs: ProjectionInputs) -> str:
    """Compute a deterministic SHA-256 hash of the inputs.

    Uses canonical JSON (sorted keys, no whitespace) so the same
    logical inputs always produce the same hash.
    """
    canonical = json.dumps(inputs.model_dump(mode="json"), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode()).hexdigest()


def dump_inputs(inputs: ProjectionInputs) -> str:
    """Serialize inputs to a JSON string."""
    return json.dumps(inputs.model_dump(mode="json"), indent=2)


def load_inputs(json_str: str) -> ProjectionInputs:
    """Deserialize inputs from a JSON string."""
    data: dict[str, Any] = json.loads(json_str)
    return ProjectionInputs.model_validate(data)


def dump_summary(summary: SummaryStats, inputs: ProjectionInputs | None = None) -> str:
    """Serialize a run summary to JSON, optionally alongside its inputs."""
    data: dict[str, Any] = {
        "total_invested": summary.total_invested,
        "total_interest": summary.total_interest,
        "total_amount": summary.total_amount,
        "months_to_million": summary.months_to_million,
        "return_on_investment_pct": return_on_investment(summary),
    }
    if inputs is not None:
        data["inputs"] = inputs.model_dump(mode="json")
    return json.dumps(data, indent=2)


def dump_schedule_csv(snapshots: Sequence[MonthlySnapshot]) -> str:
    """Export the month-by-month schedule as CSV.

    Returns:
        CSV string with month, year, invested, interest, total and
        interest_month columns, amounts rounded to cents.
    """
    if not snapshots:
        return ""

    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    writer.writerow(["month", "year", "invested", "interest", "total", "interest_month"])
    for s in snapshots:
        writer.writerow(
            [
                s.month,
                s.year,
                f"{s.invested:.2f}",
                f"{s.interest:.2f}",
                f"{s.total:.2f}",
                f"{s.interest_month:.2f}",
            ]
        )
    return output.getvalue()
