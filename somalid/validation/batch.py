"""Batch validation.

Applies guarded record validation to every record of a sequence. A failing
record is captured as an outcome and never stops the batch; outcomes keep
the input order.
"""

import logging
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from somalid.core.exceptions import ValidationError
from somalid.core.rule import DEFAULT_RULE, Rule
from somalid.i18n.catalog import SUPPORTED_LANGUAGES
from somalid.validation.record import validate_record_guarded
from somalid.validation.result import BatchResult, BatchSummary, RecordOutcome

logger = logging.getLogger(__name__)


def validate_batch(
    records: Iterable[Any],
    rule: Rule = DEFAULT_RULE,
    now: datetime | None = None,
    language: str | None = None,
) -> BatchResult:
    """Validate every record and aggregate the outcomes.

    Args:
        records: Records (mappings or RawRecords) in input order
        rule: Validation rule applied to every record
        now: Reference time for the future-expiry check
        language: If given, each error snapshot also carries
                 ``localized_message`` in this language

    Returns:
        BatchResult with one outcome per record and summary counts. The
        success rate of an empty batch is "0.00%".

    Example:
        >>> result = validate_batch([good_record, bad_id_record, good_record])
        >>> result.summary.to_dict()
        {'total': 3, 'successful': 2, 'failed': 1, 'successRate': '66.67%'}
    """
    outcomes: list[RecordOutcome] = []

    for index, record in enumerate(records):
        try:
            validated = validate_record_guarded(record, rule, now=now)
        except ValidationError as e:
            if language is not None:
                e.language = language if language in SUPPORTED_LANGUAGES else "en"
                e.localized_message = e.localize(e.language)
            logger.debug("Record %d failed: %s (%s)", index, e.message, e.code.value)
            outcomes.append(RecordOutcome(index=index, success=False, error=e.to_dict()))
        else:
            outcomes.append(RecordOutcome(index=index, success=True, record=validated))

    successful = sum(1 for o in outcomes if o.success)
    summary = BatchSummary.from_counts(len(outcomes), successful)

    logger.info(
        "Batch validated: %d total, %d successful, %d failed (%s)",
        summary.total,
        summary.successful,
        summary.failed,
        summary.success_rate,
    )

    return BatchResult(outcomes=tuple(outcomes), summary=summary)
