from __future__ import annotations

import json
import logging
import os
from typing import Any, Optional, Sequence, Tuple

from .config import DEFAULT_EXCLUDED_SUFFIX as EXCLUDED_SUFFIX
from .config import DEFAULT_INCLUDED_SUFFIX as INCLUDED_SUFFIX
from .errors import ExportError
from .partition import Partition

logger = logging.getLogger(__name__)


def output_paths(
    source_path: str,
    included_suffix: str = INCLUDED_SUFFIX,
    excluded_suffix: str = EXCLUDED_SUFFIX,
) -> Tuple[str, str]:
    """Output files sit beside the source: `<base>_PropertiesIncluded.json` and `<base>_PropertiesExcluded.json`."""
    source_path = os.path.abspath(os.fspath(source_path))
    directory = os.path.dirname(source_path)
    base, _ = os.path.splitext(os.path.basename(source_path))
    return (
        os.path.join(directory, f"{base}{included_suffix}.json"),
        os.path.join(directory, f"{base}{excluded_suffix}.json"),
    )


def write_records(path: str, records: Sequence[Any], indent: Optional[int] = 2) -> None:
    """Write records as a JSON array, even when there are zero or one of them."""
    try:
        text = json.dumps(list(records), indent=indent, ensure_ascii=False, allow_nan=False)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
            f.write('\n')
    except (OSError, ValueError) as e:
        raise ExportError(path, e) from e
    logger.info("Wrote %d record(s) to %s", len(records), path)


def export_partition(
    result: Partition,
    source_path: str,
    indent: Optional[int] = 2,
    included_suffix: str = INCLUDED_SUFFIX,
    excluded_suffix: str = EXCLUDED_SUFFIX,
) -> Tuple[str, str]:
    """Write both halves of a partition next to `source_path`.

    The included file is written first. If the excluded write then fails the
    included file is left in place and ExportError names the excluded path.
    """
    included_path, excluded_path = output_paths(source_path, included_suffix, excluded_suffix)
    write_records(included_path, result.included, indent)
    write_records(excluded_path, result.excluded, indent)
    return included_path, excluded_path
