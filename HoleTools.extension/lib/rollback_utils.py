# -*- coding: utf-8 -*-
"""Rollback utilities for undoing AUTO_HOLE placements.

This module provides functions for finding and deleting hole instances
that were automatically placed by Hole Tools.

Holes are identified by their Comments parameter containing
the AUTO_HOLE tag prefix.

Example:
    >>> from rollback_utils import find_tagged_elements, delete_elements
    >>> elements = find_tagged_elements(doc, tool_filter="DUCT")
    >>> count = delete_elements(doc, elements)
    >>> print(f"Deleted {count} holes")
"""
import re
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from pyrevit import DB

from utils_revit import get_comments, tx


# Default tag prefix used by all hole tools
DEFAULT_TAG_PREFIX = "AUTO_HOLE"

# Regex pattern to parse tag format: AUTO_HOLE:TOOL:TIMESTAMP
TAG_PATTERN = re.compile(
    r"^(AUTO_HOLE)(?::([A-Z_]+))?(?::(\d{8}_\d{6}))?$",
    re.IGNORECASE
)


def parse_tag(comment: Optional[str]) -> Optional[Dict[str, str]]:
    """Parse AUTO_HOLE tag from element comment.

    Args:
        comment: The Comments parameter value from an element.

    Returns:
        Dictionary with 'prefix', 'tool', 'timestamp' keys if valid tag,
        None if not a valid AUTO_HOLE tag.

    Examples:
        >>> parse_tag("AUTO_HOLE:DUCT:20260117_143022")
        {'prefix': 'AUTO_HOLE', 'tool': 'DUCT', 'timestamp': '20260117_143022'}
        >>> parse_tag("AUTO_HOLE:PIPE")
        {'prefix': 'AUTO_HOLE', 'tool': 'PIPE', 'timestamp': None}
        >>> parse_tag("Some other comment")
        None
    """
    if not comment:
        return None

    match = TAG_PATTERN.match(comment.strip())
    if not match:
        return None

    return {
        "prefix": match.group(1).upper(),
        "tool": match.group(2),
        "timestamp": match.group(3),
    }


def new_timestamp() -> str:
    """Timestamp part of a tag, shared by all holes of one run."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def generate_tag(tool_name: str, include_timestamp: bool = True, timestamp: Optional[str] = None) -> str:
    """Generate a new AUTO_HOLE tag for element comments.

    Examples:
        >>> generate_tag("duct", include_timestamp=False)
        'AUTO_HOLE:DUCT'
        >>> generate_tag("PIPE")  # with timestamp
        'AUTO_HOLE:PIPE:20260117_143022'
    """
    tool_name = tool_name.upper().replace(" ", "_")

    if include_timestamp:
        timestamp = timestamp or new_timestamp()
        return "{}:{}:{}".format(DEFAULT_TAG_PREFIX, tool_name, timestamp)

    return "{}:{}".format(DEFAULT_TAG_PREFIX, tool_name)


def find_tagged_elements(
    doc,
    tag_filter: Optional[str] = None,
    tool_filter: Optional[str] = None,
) -> List:
    """Find all family instances with AUTO_HOLE tags in their Comments.

    Args:
        doc: Revit document to search.
        tag_filter: Optional tag prefix to match (e.g., "AUTO_HOLE:DUCT").
        tool_filter: Optional tool name to filter by (e.g., "PIPE").
    """
    if doc is None:
        return []

    elements = []
    collector = (
        DB.FilteredElementCollector(doc)
        .OfClass(DB.FamilyInstance)
        .WhereElementIsNotElementType()
    )

    for elem in collector:
        comment = get_comments(elem)
        parsed = parse_tag(comment)
        if not parsed:
            continue

        if tag_filter and not comment.strip().upper().startswith(tag_filter.upper()):
            continue

        if tool_filter and (parsed.get("tool") or "").upper() != tool_filter.upper():
            continue

        elements.append(elem)

    return elements


def get_unique_tags(doc) -> List[Tuple[str, int]]:
    """Get all unique AUTO_HOLE tags in the document with counts.

    Returns:
        List of (PREFIX:TOOL, count) tuples, sorted by count descending.
    """
    if doc is None:
        return []

    tag_counts: Dict[str, int] = {}
    for elem in find_tagged_elements(doc):
        parsed = parse_tag(get_comments(elem))
        if not parsed:
            continue
        tool = parsed.get("tool") or "UNKNOWN"
        tag_key = "{}:{}".format(parsed["prefix"], tool)
        tag_counts[tag_key] = tag_counts.get(tag_key, 0) + 1

    return sorted(tag_counts.items(), key=lambda x: (-x[1], x[0]))


def delete_elements(doc, elements: List, transaction_name: str = "Undo AUTO_HOLE") -> int:
    """Delete elements from the document in a single transaction.

    Returns:
        Number of elements deleted. A failure rolls back the whole batch.
    """
    if doc is None or not elements:
        return 0

    element_ids = [e.Id for e in elements if getattr(e, "Id", None) is not None]
    if not element_ids:
        return 0

    with tx(transaction_name, doc=doc):
        for eid in element_ids:
            doc.Delete(eid)

    return len(element_ids)


def delete_by_tool(doc, tool_name: str, transaction_name: Optional[str] = None) -> int:
    """Delete all holes created from one source kind ('DUCT' or 'PIPE')."""
    elements = find_tagged_elements(doc, tool_filter=tool_name)

    if not transaction_name:
        transaction_name = "Undo AUTO_HOLE:{}".format(tool_name.upper())

    return delete_elements(doc, elements, transaction_name)


def delete_all_auto_holes(doc) -> int:
    """Delete ALL elements with AUTO_HOLE tags.

    WARNING: This is destructive and cannot be undone after save!
    """
    elements = find_tagged_elements(doc)
    return delete_elements(doc, elements, "Delete All AUTO_HOLE")
