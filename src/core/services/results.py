"""Classification of bulk-operation responses.

Why in services:
- The server reports imports and deletes as loosely shaped JSON: lists may be
  missing or null, entries may lack an id, and flags may disagree with the
  lists.
- Workflows only see `ImportOutcome` / `DeleteOutcome`, whose partitions are
  normalised here.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from core.domain.models import DeleteItem, DeleteOutcome, ImportOutcome, JobLoadItem

logger = logging.getLogger(__name__)


def _items(payload: dict[str, Any], key: str) -> list[dict[str, Any]]:
    value = payload.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _item_key(item: JobLoadItem) -> tuple[Any, ...] | None:
    if item.index is not None:
        return ("index", item.index)
    if item.id:
        return ("id", item.id)
    return None


def classify_import(payload: dict[str, Any]) -> ImportOutcome:
    """Build disjoint succeeded/skipped/failed partitions.

    An item reported in more than one partition is kept in the first one in
    the order failed, skipped, succeeded. Items carrying no index nor id are
    kept as reported.
    """

    seen: set[tuple[Any, ...]] = set()
    partitions: dict[str, list[JobLoadItem]] = {}
    for name in ("failed", "skipped", "succeeded"):
        kept: list[JobLoadItem] = []
        for raw in _items(payload, name):
            item = JobLoadItem.model_validate(raw)
            key = _item_key(item)
            if key is not None:
                if key in seen:
                    logger.debug("Dropping duplicate import entry %s from %s", key, name)
                    continue
                seen.add(key)
            kept.append(item)
        partitions[name] = kept

    return ImportOutcome(
        succeeded=partitions["succeeded"],
        skipped=partitions["skipped"],
        failed=partitions["failed"],
    )


def classify_delete(payload: dict[str, Any], requested: Iterable[str] = ()) -> DeleteOutcome:
    """Build a `DeleteOutcome`; success is derived from the failed list."""

    succeeded = [DeleteItem.model_validate(raw) for raw in _items(payload, "succeeded")]
    failed = [DeleteItem.model_validate(raw) for raw in _items(payload, "failed")]

    count = payload.get("requestCount")
    if not isinstance(count, int) or count < 0:
        count = len(list(requested)) or len(succeeded) + len(failed)

    outcome = DeleteOutcome(request_count=count, succeeded=succeeded, failed=failed)
    reported = payload.get("allsuccessful")
    if isinstance(reported, bool) and reported != outcome.all_successful:
        logger.debug(
            "Server allsuccessful=%s disagrees with %d failed entries", reported, len(failed)
        )
    return outcome
