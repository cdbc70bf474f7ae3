"""Batch validation result data structures.

This module defines the outcome of validating one record inside a batch
(RecordOutcome), the aggregate counts (BatchSummary) and the complete batch
result (BatchResult). All three are immutable once built.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import polars as pl

from somalid.core.record import ValidatedRecord
from somalid.privacy import mask_id

# Columns of the tabular batch report, in order
REPORT_COLUMNS = [
    "index",
    "success",
    "code",
    "field",
    "message",
    "id_number",
    "name",
    "sex",
    "dob_iso",
    "issue_iso",
    "expiry_iso",
]


@dataclass(frozen=True)
class RecordOutcome:
    """Result of validating one record of a batch.

    Attributes:
        index: Position of the record in the input sequence
        success: True if the record validated
        record: Normalized record when success is True
        error: Error snapshot (message, code, field, messages) when success
              is False
    """

    index: int
    success: bool
    record: ValidatedRecord | None = None
    error: dict[str, Any] | None = None

    @property
    def code(self) -> str | None:
        """ErrorCode value of the failure, or None for a valid record."""
        return self.error["code"] if self.error else None

    def to_dict(self, masked: bool = False) -> dict[str, Any]:
        """Plain-data view; with ``masked`` the ID is replaced by id_masked."""
        data: dict[str, Any] = {"index": self.index, "success": self.success}
        if self.record is not None:
            data["data"] = self.record.masked() if masked else self.record.to_dict()
        if self.error is not None:
            data["error"] = self.error
        return data


@dataclass(frozen=True)
class BatchSummary:
    """Aggregate counts of a batch.

    Attributes:
        total: Number of records processed
        successful: Number of records that validated
        failed: Number of records that failed
        success_rate: Percentage with two decimals, e.g. "66.67%".
                     An empty batch reports "0.00%".
    """

    total: int
    successful: int
    failed: int
    success_rate: str

    @classmethod
    def from_counts(cls, total: int, successful: int) -> "BatchSummary":
        """Build a summary from counts.

        Args:
            total: Number of records processed
            successful: Number of records that passed

        Returns:
            BatchSummary with the rate formatted to two decimals ("0.00%" for
            an empty batch)
        """
        rate = successful / total * 100 if total else 0.0
        return cls(
            total=total,
            successful=successful,
            failed=total - successful,
            success_rate=f"{rate:.2f}%",
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the summary with the camelCase successRate key."""
        return {
            "total": self.total,
            "successful": self.successful,
            "failed": self.failed,
            "successRate": self.success_rate,
        }


@dataclass(frozen=True)
class BatchResult:
    """Per-record outcomes of a batch, in input order, plus summary.

    Example:
        >>> result = validate_batch(records)
        >>> result.summary.success_rate
        '66.67%'
        >>> [o.index for o in result.failures()]
        [1]
    """

    outcomes: tuple[RecordOutcome, ...]
    summary: BatchSummary
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def is_valid(self) -> bool:
        """True if every record validated."""
        return self.summary.failed == 0

    def failures(self) -> list[RecordOutcome]:
        """Outcomes of records that failed, in input order."""
        return [o for o in self.outcomes if not o.success]

    def successes(self) -> list[RecordOutcome]:
        """Outcomes of records that passed, in input order."""
        return [o for o in self.outcomes if o.success]

    def to_json(self, masked: bool = False) -> dict[str, Any]:
        """Export the batch as JSON-serializable data.

        Args:
            masked: Replace each normalized ID with its masked form
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "summary": self.summary.to_dict(),
            "results": [o.to_dict(masked=masked) for o in self.outcomes],
        }

    def to_dataframe(self, masked: bool = False) -> pl.DataFrame:
        """One row per record with outcome columns and normalized fields.

        Failed records leave the normalized columns null. With ``masked`` the
        id_number column holds the masked ID.
        """
        rows: list[dict[str, Any]] = []
        for outcome in self.outcomes:
            row: dict[str, Any] = dict.fromkeys(REPORT_COLUMNS)
            row["index"] = outcome.index
            row["success"] = outcome.success
            if outcome.record is not None:
                row.update(outcome.record.to_dict())
                if masked:
                    row["id_number"] = mask_id(row["id_number"])
            if outcome.error is not None:
                row["code"] = outcome.error["code"]
                row["field"] = outcome.error.get("field")
                row["message"] = outcome.error.get("localized_message") or outcome.error["message"]
            rows.append(row)

        schema = {name: pl.Utf8 for name in REPORT_COLUMNS}
        schema["index"] = pl.Int64
        schema["success"] = pl.Boolean
        return pl.DataFrame(rows, schema=schema)

    def format(self) -> str:
        """Format the batch as human-readable text.

        Example:
            >>> print(result.format())
            Batch Validation (2024-01-15 10:30:00)
            ============================================================
            Total: 3, Successful: 2, Failed: 1, Success rate: 66.67%
            [1] INVALID_ID_NUMBER: ID number must be exactly 12 digits
        """
        lines = [
            f"Batch Validation ({self.timestamp.strftime('%Y-%m-%d %H:%M:%S')})",
            "=" * 60,
            (
                f"Total: {self.summary.total}, Successful: {self.summary.successful}, "
                f"Failed: {self.summary.failed}, Success rate: {self.summary.success_rate}"
            ),
        ]
        for outcome in self.failures():
            message = outcome.error.get("localized_message") or outcome.error["message"]
            lines.append(f"[{outcome.index}] {outcome.code}: {message}")
        return "\n".join(lines)
