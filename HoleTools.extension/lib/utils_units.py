# -*- coding: utf-8 -*-

"""Units conversion helpers for Revit.

Revit internal units are feet. Hole sizes are reported in millimeters.

Example:
    >>> from utils_units import ft_to_mm, format_mm
    >>> ft_to_mm(1.0)
    304.8
    >>> format_mm(0.5)
    '152'
"""
from typing import Optional, Union


MM_PER_FOOT: float = 304.8


def ft_to_mm(ft: Optional[Union[float, int, str]]) -> Optional[float]:
    """Convert feet to millimeters.

    Args:
        ft: Value in feet. Can be float, int, or numeric string.
            If None, returns None.

    Returns:
        Value converted to millimeters, or None if input is None.

    Examples:
        >>> ft_to_mm(1.0)
        304.8
        >>> ft_to_mm(None)
        None
    """
    if ft is None:
        return None
    return float(ft) * MM_PER_FOOT


def format_mm(ft: Optional[Union[float, int, str]]) -> str:
    """Format a length in feet as whole millimeters, '-' for None."""
    mm = ft_to_mm(ft)
    if mm is None:
        return '-'
    return '{0:.0f}'.format(mm)
