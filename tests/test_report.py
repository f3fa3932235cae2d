from dataclasses import FrozenInstanceError

import pytest

from filebug.report.report import IssueReport
from filebug.report.url import render_body

LABELS = ["Expected behavior", "Actual behavior", "Steps to reproduce", "Additional environment details"]


def test_sections_are_in_fixed_order_regardless_of_presence():
    report = IssueReport(title="Crash", additional_environment="Linux", expected_behavior="No crash")

    assert [label for label, _ in report.sections()] == LABELS
    assert report.sections()[0] == ("Expected behavior", "No crash")
    assert report.sections()[1] == ("Actual behavior", None)


def test_report_is_immutable():
    report = IssueReport(title="Crash")

    with pytest.raises(FrozenInstanceError):
        report.title = "Other"  # type: ignore


def test_body_is_empty_without_optional_fields():
    assert render_body(IssueReport(title="Crash on save")) == ""


def test_body_omits_absent_sections():
    report = IssueReport(title="Crash on save", steps_to_reproduce="1. Open app\n2. Click save")

    assert render_body(report) == "### Steps to reproduce\n1. Open app\n2. Click save"


def test_body_renders_all_sections_in_order():
    report = IssueReport(
        title="Crash on save",
        additional_environment="macOS 14",
        steps_to_reproduce="Click save",
        actual_behavior="It crashed",
        expected_behavior="It saves",
    )

    assert render_body(report) == (
        "### Expected behavior\nIt saves\n\n"
        "### Actual behavior\nIt crashed\n\n"
        "### Steps to reproduce\nClick save\n\n"
        "### Additional environment details\nmacOS 14"
    )


def test_empty_string_is_a_present_field():
    report = IssueReport(title="Crash", actual_behavior="")

    assert render_body(report) == "### Actual behavior\n"
