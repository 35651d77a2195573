"""Gradio event handlers for the sample browser.

Handlers are plain functions: they take component values, return component
values, and report failures as status text instead of raising.
"""
from __future__ import annotations

from typing import Any, List, Optional, Tuple

import gradio as gr

from .config import DumperSettings
from .dumper import dumps
from .io_utils import read_json_document
from .log import get_logger
from .samples import Sample, SampleHarness

logger = get_logger('handlers')


def sample_choices(harness: SampleHarness) -> List[Tuple[str, int]]:
    return [(f"{s.category} / {s.title}", s.number) for s in harness]


def describe_sample(sample: Sample) -> str:
    return f"### {sample.title}\n\n*{sample.category}*\n\n{sample.description}"


def select_sample_handler(number, harness: SampleHarness):
    if number is None:
        return "", "", ""
    try:
        sample = harness[int(number)]
    except KeyError as e:
        return "", "", str(e)
    return describe_sample(sample), sample.code, ""


def run_sample_handler(number, harness: SampleHarness):
    if number is None:
        return "", "No sample selected."
    try:
        sample = harness[int(number)]
    except KeyError as e:
        return "", str(e)

    logger.info("Running sample %d (%s)", sample.number, sample.name)
    output = sample.invoke_safe()
    return output, f"Ran '{sample.title}'."


def run_all_samples_handler(harness: SampleHarness):
    try:
        count = harness.run_all_samples()
    except Exception as e:
        logger.exception("Running all samples failed")
        return f"Error running samples: {str(e)}"
    return f"Ran {count} samples."


def load_json_handler(file_obj):
    if file_obj is None:
        return None, "No file uploaded."
    try:
        data = read_json_document(file_obj)
    except Exception as e:
        return None, f"Error parsing JSON: {str(e)}"
    return data, f"Loaded a {type(data).__name__} document."


def dump_json_handler(data: Any, depth, settings: Optional[DumperSettings] = None):
    if data is None:
        return "", "No data loaded."
    try:
        depth = int(depth or 0)
        text = dumps(data, depth, settings=settings)
    except Exception as e:
        logger.exception("Dumping JSON document failed")
        return "", f"Error during dump: {str(e)}"
    return text, f"Dumped with depth {depth}: {len(text.splitlines())} lines."


def refresh_depth_slider(settings: DumperSettings):
    return gr.update(value=settings.default_depth)
