# -*- coding: utf-8 -*-
"""Pure hole placement rules.

No Revit API imports here. Hits are duck-typed like
``Autodesk.Revit.DB.ReferenceWithContext`` (``Proximity`` and
``GetReference()``), references like ``Autodesk.Revit.DB.Reference``
(``ElementId`` and ``LinkedElementId``), points and vectors like ``XYZ``
(``+`` and ``* scalar``).

Example:
    >>> kept, beyond, dupes = split_hits(hits, line.Length)
    >>> for hit in kept:
    ...     point = hole_point(line.GetEndPoint(0), line.Direction, hit.Proximity)
"""

INVALID_ID = -1


def element_id_value(element_id):
    """Integer value of an ElementId, -1 for None.

    Revit 2024+ exposes ``Value``; older versions only ``IntegerValue``.
    """
    if element_id is None:
        return INVALID_ID
    value = getattr(element_id, 'Value', None)
    if value is None:
        value = getattr(element_id, 'IntegerValue', INVALID_ID)
    try:
        return int(value)
    except (TypeError, ValueError):
        return INVALID_ID


def reference_key(hit):
    """Identity of the wall behind a hit: (linked element id, element id).

    Front and back faces of one wall yield the same key.
    """
    ref = hit.GetReference()
    return (
        element_id_value(getattr(ref, 'LinkedElementId', None)),
        element_id_value(getattr(ref, 'ElementId', None)),
    )


def clip_hits(hits, length):
    """Keep hits the element physically passes through (proximity <= length)."""
    return [h for h in hits or [] if h.Proximity <= length]


def dedupe_hits(hits):
    """Keep the first hit per wall identity, preserving order.

    The survivor is whichever hit came first from the intersector. This is
    not a guaranteed nearest-face selection.
    """
    seen = set()
    result = []
    for h in hits or []:
        key = reference_key(h)
        if key in seen:
            continue
        seen.add(key)
        result.append(h)
    return result


def split_hits(hits, length):
    """Clip then dedupe.

    Returns:
        (kept_hits, beyond_length_count, duplicate_count)
    """
    hits = list(hits or [])
    clipped = clip_hits(hits, length)
    kept = dedupe_hits(clipped)
    return kept, len(hits) - len(clipped), len(clipped) - len(kept)


def hole_point(origin, direction, proximity):
    """Point on the ray: origin + direction * proximity."""
    return origin + (direction * proximity)


def hole_size(diameter):
    """(width, height) of the rectangular opening for a round duct or pipe."""
    d = float(diameter)
    return d, d


def centered_elevation(default_elevation, diameter):
    """Offset from level that centers the opening on the element axis."""
    return float(default_elevation) - float(diameter) / 2.0
