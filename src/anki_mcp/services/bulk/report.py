"""
Text reports for bulk operations.
"""

from anki_mcp.models.bulk import BatchOperationResult, RollbackSnapshot

MAX_LISTED_ERRORS = 10


def format_error_lines(result: BatchOperationResult, entity: str) -> str:
    """Every failure as ``"<entity> <id>: <error>"``, one per line."""
    return "\n".join(f"{entity} {e.item_id}: {e.error}" for e in result.errors)


def render_bulk_report(
    headline: str,
    result: BatchOperationResult,
    *,
    entity: str = "Note",
    details: list[str] | None = None,
    extra: list[str] | None = None,
    snapshot: RollbackSnapshot | None = None,
) -> str:
    """
    Render the report returned by the bulk tools.

    Args:
        headline: First line, e.g. "Bulk add tags operation completed."
        result: Aggregate batch result
        entity: "Note" or "Card", used for the totals and error lines
        details: Operation-specific lines shown under the headline
        extra: Lines appended after the counts
        snapshot: Rollback snapshot, reported when rollback was requested

    Returns:
        Report text listing every failure.
    """
    lines = [headline, *(details or [])]
    lines.append(f"Total {entity.lower()}s: {result.total_operations}")
    lines.append(f"Successful: {result.successful}")
    lines.append(f"Failed: {result.failed}")
    lines.extend(extra or [])

    if snapshot is not None:
        lines.append(f"Rollback data stored for {len(snapshot)} notes.")
        lines.append(f"Rollback snapshot: {snapshot.to_json()}")

    report = "\n".join(lines)
    if result.errors:
        report += f"\n\nErrors:\n{format_error_lines(result, entity)}"
    return report


def format_bulk_operation_result(
    result: BatchOperationResult,
    operation_name: str,
    show_errors: bool = True,
) -> str:
    """
    Summarize a batch result, listing at most ten errors.

    Examples:
        >>> r = BatchOperationResult(total_operations=1, successful=1)
        >>> print(format_bulk_operation_result(r, "Restore tags"))
        Restore tags completed:
        - Total operations: 1
        - Successful: 1
        - Failed: 0
    """
    message = f"{operation_name} completed:\n"
    message += f"- Total operations: {result.total_operations}\n"
    message += f"- Successful: {result.successful}\n"
    message += f"- Failed: {result.failed}"

    if show_errors and result.errors:
        message += "\n\nErrors:\n"
        message += "\n".join(
            f"- ID {e.item_id}: {e.error}" for e in result.errors[:MAX_LISTED_ERRORS]
        )
        if len(result.errors) > MAX_LISTED_ERRORS:
            message += f"\n... and {len(result.errors) - MAX_LISTED_ERRORS} more errors"

    return message
