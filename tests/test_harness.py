import sys
import threading
from dataclasses import dataclass

import pytest

from object_dumper.errors import SampleNotFoundError
from object_dumper.samples.harness import (
    SampleHarness,
    category,
    description,
    linked_class,
    linked_method,
    title,
)


class DemoHarness(SampleHarness):
    TITLE = "Demo Module"
    PREFIX = "demo"

    def __init__(self):
        self.init_calls = 0
        super().__init__()

    @dataclass
    class Record:
        key: str
        value: int

    def init_sample(self):
        self.init_calls += 1

    @category("Basics")
    @title("Records")
    @description("Dumps two records.")
    @linked_method("_make")
    @linked_method("_label")
    @linked_class("Record")
    def demo_records(self):
        self.write_line(self._label())
        for record in self._make():
            self.dump(record)

    def demo_numbers(self):
        self.dump([1, [2, 3]], depth=1)

    @linked_method("missing")
    def DemoMissingLink(self):
        self.write_line("ok")

    def helper(self):
        return "not a sample"

    def _make(self):
        return [self.Record("a", 1), self.Record("b", 2)]

    def _label(self):
        return "Records:"


class FailingHarness(SampleHarness):
    PREFIX = "check"

    @category("Errors")
    def check_division(self):
        self.write_line("before")
        return 1 / 0


def test_samples_discovered_in_declaration_order():
    h = DemoHarness()
    assert [s.name for s in h] == ["demo_records", "demo_numbers", "DemoMissingLink"]
    assert [s.number for s in h] == [1, 2, 3]
    assert len(h) == 3
    assert h.title == "Demo Module"


def test_metadata_and_defaults():
    h = DemoHarness()
    first, second = h[1], h[2]
    assert (first.category, first.title, first.description) == ("Basics", "Records", "Dumps two records.")
    assert (second.category, second.title, second.description) == ("Miscellaneous", "Demo Sample 2", "See code.")
    assert str(first) == "Records"


def test_code_includes_linked_methods_and_classes_in_order():
    code = DemoHarness()[1].code
    assert code.startswith("def demo_records(self):")
    assert "@category" not in code
    make = code.index("def _make(self):")
    label = code.index("def _label(self):")
    record = code.index("class Record:")
    assert make < label < record


def test_code_for_missing_link():
    code = DemoHarness()[3].code
    assert code.startswith("def DemoMissingLink(self):")
    assert "# missing code not found" in code


def test_invoke_captures_output():
    h = DemoHarness()
    assert h[1].invoke() == "Records:\nkey=a   value=1\nkey=b   value=2\n"
    assert h[2].invoke() == "1\n...\n  2\n  3\n"
    assert h.init_calls == 2
    assert h.output is sys.stdout


def test_samples_by_category_preserves_order():
    groups = DemoHarness().samples_by_category()
    assert list(groups) == ["Basics", "Miscellaneous"]
    assert [s.number for s in groups["Miscellaneous"]] == [2, 3]


def test_unknown_sample_number():
    h = DemoHarness()
    with pytest.raises(SampleNotFoundError):
        h[42]
    with pytest.raises(KeyError):
        h[0]


def test_invoke_propagates_errors():
    with pytest.raises(ZeroDivisionError):
        FailingHarness()[1].invoke()


def test_invoke_safe_reports_errors_in_output():
    out = FailingHarness()[1].invoke_safe()
    assert out.startswith("before\n")
    assert "ZeroDivisionError" in out


def test_run_all_samples_discards_output(capsys):
    assert DemoHarness().run_all_samples() == 3
    assert capsys.readouterr().out == ""


class InterleavedHarness(SampleHarness):
    PREFIX = "step"

    def __init__(self):
        self.a_wrote = threading.Event()
        self.b_wrote = threading.Event()
        super().__init__()

    def step_a(self):
        self.write_line("A1")
        self.a_wrote.set()
        self.b_wrote.wait(timeout=5)
        self.write_line("A2")

    def step_b(self):
        self.a_wrote.wait(timeout=5)
        self.write_line("B1")
        self.b_wrote.set()


def test_concurrent_invocations_keep_separate_output():
    h = InterleavedHarness()
    results = {}

    def run(number):
        results[number] = h[number].invoke()

    threads = [threading.Thread(target=run, args=(n,)) for n in (1, 2)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    assert results == {1: "A1\nA2\n", 2: "B1\n"}
    assert h.output is sys.stdout
