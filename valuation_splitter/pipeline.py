"""Load, select, partition, export.

Each stage fails fast. Nothing is written unless the operator confirmed a
non-empty selection, so a cancelled or empty run leaves the disk untouched.
"""
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from .config import SplitterConfig
from .exporter import export_partition
from .partition import Partition, partition
from .records import load_records
from .selection import Cancelled, Selector

logger = logging.getLogger(__name__)


class RunStatus(enum.Enum):
    EXPORTED = 'exported'
    NOTHING_TO_EXPORT = 'nothing_to_export'
    CANCELLED = 'cancelled'


@dataclass(frozen=True)
class RunOutcome:
    status: RunStatus
    record_count: int = 0
    partition: Optional[Partition] = None
    included_path: Optional[str] = None
    excluded_path: Optional[str] = None


def run_split(source_path: str, selector: Selector, config: Optional[SplitterConfig] = None) -> RunOutcome:
    """Run one split of `source_path`, asking `selector` which records to exclude."""
    config = config or SplitterConfig()

    records = load_records(source_path, config.id_field)
    selection = selector.select(records)

    if isinstance(selection, Cancelled):
        logger.info("Selection cancelled; no files written")
        return RunOutcome(RunStatus.CANCELLED, record_count=len(records))

    if not selection.identifiers:
        logger.info("No records selected for exclusion; no files written")
        return RunOutcome(RunStatus.NOTHING_TO_EXPORT, record_count=len(records))

    result = partition(records, selection.identifiers, config.id_field)
    included_path, excluded_path = export_partition(
        result,
        source_path,
        indent=config.json_indent,
        included_suffix=config.included_suffix,
        excluded_suffix=config.excluded_suffix,
    )
    return RunOutcome(
        RunStatus.EXPORTED,
        record_count=len(records),
        partition=result,
        included_path=included_path,
        excluded_path=excluded_path,
    )
