"""
Regex-driven tag selection for smart tag cleanup.
"""

from collections.abc import Iterable, Sequence
import re
from typing import Any

from anki_mcp.utils.errors import PatternError


def compile_patterns(patterns: Iterable[str]) -> list[re.Pattern[str]]:
    """
    Compile every pattern up front.

    Raises:
        PatternError: For the first pattern that is not a valid regex;
            nothing is matched when any pattern is invalid
    """
    compiled = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as e:
            raise PatternError(pattern, str(e)) from e
    return compiled


def match_tags(tags: Iterable[str], patterns: Sequence[re.Pattern[str]]) -> list[str]:
    """
    Return the tags matching at least one pattern, in their original order.

    Patterns are searched anywhere in the tag; anchor them (``^temp_``)
    to match prefixes only.

    Examples:
        >>> match_tags(["temp_a", "keep", "old_b"], compile_patterns(["^temp_.*", "^old_.*"]))
        ['temp_a', 'old_b']
    """
    return [tag for tag in tags if any(p.search(tag) for p in patterns)]


def select_matching_tags(
    notes_info: Iterable[dict[str, Any] | None],
    patterns: Sequence[re.Pattern[str]],
) -> dict[int, list[str]]:
    """
    Build the per-note removal set.

    Notes without an ID, without tags, or without any matching tag are
    left out of the result entirely.
    """
    selection: dict[int, list[str]] = {}
    for note_info in notes_info:
        if not note_info or not note_info.get("noteId") or not note_info.get("tags"):
            continue
        matched = match_tags(note_info["tags"], patterns)
        if matched:
            selection[note_info["noteId"]] = matched
    return selection
