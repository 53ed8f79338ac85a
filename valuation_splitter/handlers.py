from __future__ import annotations

import logging
import os
import tempfile
from typing import Any, List, Optional

import gradio as gr

from .config import SplitterConfig, get_config
from .errors import ExportError, ParseError, ReadError, StructureError
from .exporter import export_partition
from .gui_selector import build_choices, submit_selection
from .partition import partition
from .records import load_records

logger = logging.getLogger(__name__)


def _source_name(file_obj) -> str:
    if file_obj is None:
        return "upload.json"
    path = file_obj if isinstance(file_obj, (str, os.PathLike)) else getattr(file_obj, 'name', 'upload.json')
    return os.path.basename(os.fspath(path)) or "upload.json"


def load_records_handler(file_obj, config: Optional[SplitterConfig] = None):
    """Parse an uploaded export and populate the record checkboxes."""
    config = config or get_config()
    if file_obj is None:
        return None, gr.update(choices=[], value=[]), "No file uploaded.", ""

    try:
        records = load_records(file_obj, config.id_field)
    except (FileNotFoundError, ReadError) as e:
        return None, gr.update(choices=[], value=[]), f"Error reading file: {e}", ""
    except ParseError as e:
        return None, gr.update(choices=[], value=[]), f"Error parsing JSON: {e}", ""
    except StructureError as e:
        return None, gr.update(choices=[], value=[]), f"Unexpected structure: {e}", ""

    choices = build_choices(records, config.id_field, config.summary_fields)
    return (
        records,
        gr.update(choices=choices, value=[]),
        f"Successfully loaded {_source_name(file_obj)}.",
        f"Records: {len(records)}",
    )


def split_records_handler(records: Optional[List[Any]], selected, file_obj, config: Optional[SplitterConfig] = None):
    """Write the included/excluded files for the ticked records and offer them for download."""
    config = config or get_config()
    if records is None:
        return None, "No data loaded."

    selection = submit_selection(records, selected, config.id_field)
    if not selection.identifiers:
        return None, "No records selected for exclusion. Nothing to export."

    result = partition(records, selection.identifiers, config.id_field)
    out_dir = tempfile.mkdtemp(prefix="valuation_splitter_")
    source_path = os.path.join(out_dir, _source_name(file_obj))

    try:
        paths = export_partition(
            result,
            source_path,
            indent=config.json_indent,
            included_suffix=config.included_suffix,
            excluded_suffix=config.excluded_suffix,
        )
    except ExportError as e:
        logger.error("Export failed: %s", e)
        return None, f"Error during export: {e}"

    return list(paths), f"Split complete: {len(result.included)} included, {len(result.excluded)} excluded."
