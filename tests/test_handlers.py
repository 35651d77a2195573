import json

import pytest

from object_dumper.config import DumperSettings
from object_dumper.handlers import (
    describe_sample,
    dump_json_handler,
    load_json_handler,
    run_all_samples_handler,
    run_sample_handler,
    sample_choices,
    select_sample_handler,
)
from object_dumper.samples import QuerySamples


@pytest.fixture(scope="module")
def harness():
    return QuerySamples()


def test_sample_choices_label_by_category_and_title(harness):
    choices = sample_choices(harness)
    assert len(choices) == 16
    assert choices[0] == ("Restriction Operators / Where - Task 1", 1)


def test_select_sample_returns_description_and_code(harness):
    info, code, output = select_sample_handler(1, harness)
    assert "Where - Task 1" in info
    assert code.startswith("def query1(self):")
    assert output == ""


def test_select_nothing(harness):
    assert select_sample_handler(None, harness) == ("", "", "")


def test_run_sample(harness):
    output, status = run_sample_handler(1, harness)
    assert output.startswith("Numbers < 5:\n")
    assert status == "Ran 'Where - Task 1'."


def test_run_unknown_sample(harness):
    assert run_sample_handler(None, harness) == ("", "No sample selected.")
    assert run_sample_handler(99, harness) == ("", "No sample numbered 99")


def test_run_all(harness):
    assert run_all_samples_handler(harness) == "Ran 16 samples."


def test_load_and_dump_json(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text(json.dumps({"id": "A1", "orders": [{"total": 10}, {"total": 20}]}), encoding="utf-8")

    data, status = load_json_handler(str(path))
    assert status == "Loaded a dict document."

    text, status = dump_json_handler(data, 1.0)
    assert text.splitlines() == [
        "id=A1   orders=...",
        "  orders: total=10",
        "  orders: total=20",
    ]
    assert status == "Dumped with depth 1: 3 lines."


def test_dump_json_uses_settings():
    text, _ = dump_json_handler([[1]], 1, settings=DumperSettings(indent_width=4))
    assert text == "...\n    1\n"


def test_load_errors_become_status(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    data, status = load_json_handler(str(path))
    assert data is None
    assert status.startswith("Error parsing JSON:")
    assert load_json_handler(None) == (None, "No file uploaded.")


def test_dump_without_data():
    assert dump_json_handler(None, 0) == ("", "No data loaded.")


def test_negative_depth_becomes_status():
    text, status = dump_json_handler({"a": 1}, -1)
    assert text == ""
    assert status.startswith("Error during dump:")


def test_describe_sample_uses_metadata(harness):
    info = describe_sample(harness[2])
    assert info == (
        "### Where - Task 2\n\n*Restriction Operators*\n\n"
        "This sample returns all products that are in stock."
    )
