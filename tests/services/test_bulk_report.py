"""Tests for bulk operation reports."""

from anki_mcp.models.bulk import BatchError, BatchOperationResult, RollbackSnapshot
from anki_mcp.services.bulk.report import format_bulk_operation_result, render_bulk_report


def _result_with_errors(n_errors, total=None):
    errors = [BatchError(index=i, item_id=100 + i, error="locked") for i in range(n_errors)]
    total = total if total is not None else n_errors
    return BatchOperationResult(
        total_operations=total,
        successful=total - n_errors,
        failed=n_errors,
        errors=errors,
    )


def test_render_report_lists_every_error():
    result = _result_with_errors(12, total=20)

    report = render_bulk_report("Bulk add tags operation completed.", result)

    assert report.startswith("Bulk add tags operation completed.\n")
    assert "Total notes: 20" in report
    assert "Successful: 8" in report
    assert "Failed: 12" in report
    assert "Note 100: locked" in report
    assert "Note 111: locked" in report


def test_render_report_without_errors_has_no_error_section():
    result = BatchOperationResult(total_operations=2, successful=2)

    report = render_bulk_report("Done.", result, entity="Card", details=['Target deck: "X"'])

    assert report == 'Done.\nTarget deck: "X"\nTotal cards: 2\nSuccessful: 2\nFailed: 0'


def test_render_report_includes_snapshot():
    result = BatchOperationResult(total_operations=1, successful=1)

    report = render_bulk_report("Done.", result, snapshot=RollbackSnapshot({5: ["a"]}))

    assert "Rollback data stored for 1 notes." in report
    assert 'Rollback snapshot: {"5":["a"]}' in report


def test_format_result_caps_listed_errors():
    result = _result_with_errors(13)

    message = format_bulk_operation_result(result, "Bulk restore tags")

    assert message.startswith("Bulk restore tags completed:\n- Total operations: 13")
    assert "- ID 109: locked" in message
    assert "- ID 110: locked" not in message
    assert message.endswith("... and 3 more errors")


def test_format_result_can_hide_errors():
    message = format_bulk_operation_result(_result_with_errors(2), "X", show_errors=False)

    assert "Errors" not in message
    assert message.endswith("- Failed: 2")
