from __future__ import annotations

import logging
import os
import tempfile
from typing import Optional

import gradio as gr

from .config import InspectorConfig
from .errors import InputTooLargeError
from .formatter import FormatOptions
from .io_utils import read_json_text
from .pipeline import (
    SAMPLE_JSON,
    describe_size,
    format_size,
    generate_preview,
    is_too_large,
    process,
    quick_stats,
    validate,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = InspectorConfig()


def _describe_issue(issue) -> str:
    location = issue.location()
    return f"{issue.message} ({location})" if location else issue.message


def load_file_handler(file_obj, config: Optional[InspectorConfig] = None):
    config = config or DEFAULT_CONFIG
    if file_obj is None:
        return gr.update(), "", "No file uploaded."

    try:
        text = read_json_text(file_obj, max_bytes=config.max_input_bytes)
    except InputTooLargeError as exc:
        return gr.update(), "", str(exc)
    except (OSError, ValueError) as exc:
        return gr.update(), "", f"Error reading file: {str(exc)}"

    info = describe_size(text)
    preview = generate_preview(text, config.preview_length)
    return text, preview, f"Loaded {info['size_formatted']} ({info['lines']} lines)."


def process_handler(text, view, indent_size=None, sort_keys=False, config: Optional[InspectorConfig] = None):
    """Validate the input and render the selected view.

    Returns (output_text, status_message). Errors never propagate to the UI;
    they end up in the status message.
    """
    config = config or DEFAULT_CONFIG
    text = text or ''

    if is_too_large(text, config.max_input_bytes):
        return "", f"Input too large. Maximum size is {format_size(config.max_input_bytes)}."

    result = validate(text)
    if not result.is_valid:
        return "", "Error: " + "; ".join(_describe_issue(e) for e in result.errors)

    if indent_size is None or indent_size == "":
        indent_size = config.indent_size

    try:
        options = FormatOptions(indent_size=int(indent_size), sort_keys=bool(sort_keys))
        output = process(text, view or 'formatted', options, top_values=config.top_values)
    except ValueError as exc:
        return "", f"Error: {str(exc)}"
    except RecursionError:
        logger.warning("Rendering the %s view exceeded the recursion limit", view)
        return "", "Error: JSON too deeply nested"

    status = f"Valid JSON. {describe_size(text)['size_formatted']}."
    if result.warnings:
        status += " Warnings: " + "; ".join(_describe_issue(w) for w in result.warnings)
    return output, status


def export_handler(output_text, file_name=None):
    if not output_text:
        return None, "Nothing to export."

    if not file_name or not file_name.strip():
        file_name = "json-inspector-output"
    file_name = file_name.strip()
    if not file_name.lower().endswith('.json'):
        file_name += '.json'

    path = os.path.join(tempfile.gettempdir(), file_name)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(output_text)
    except (OSError, UnicodeEncodeError) as exc:
        return None, f"Error during export: {str(exc)}"

    logger.debug("Exported %d characters to %s", len(output_text), path)
    return path, f"Export successful! Saved to {path}"


def summary_handler(text):
    if not text or not text.strip():
        return None
    return quick_stats(text)


def sample_handler():
    return SAMPLE_JSON


def clear_handler():
    return "", "", "", "", None
