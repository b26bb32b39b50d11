# -*- coding: utf-8 -*-
"""Revit API access for hole placement.

Everything that touches the document lives here; the rules themselves are in
hole_domain. Creation functions must be called inside an open transaction.
"""

from pyrevit import DB

import hole_domain
from utils_revit import get_param


class HoleParameterError(Exception):
    """The hole family instance does not expose a parameter we write."""


def get_symbol_type_name(symbol):
    if symbol is None:
        return u''
    name = getattr(symbol, 'Name', None)
    if name:
        return name
    # Element.Name is not always reachable on FamilySymbol from Python
    p = symbol.get_Parameter(DB.BuiltInParameter.SYMBOL_NAME_PARAM)
    return (p.AsString() if p else None) or u''


def find_hole_symbol(doc, family_name, type_name):
    """First Generic Model type with exactly this family and type name."""
    col = (DB.FilteredElementCollector(doc)
           .OfClass(DB.FamilySymbol)
           .OfCategory(DB.BuiltInCategory.OST_GenericModel))
    for s in col:
        if get_symbol_type_name(s) != type_name:
            continue
        if getattr(s, 'FamilyName', None) != family_name:
            continue
        return s
    return None


def find_3d_view(doc):
    """First 3D view that is not a view template."""
    for v in DB.FilteredElementCollector(doc).OfClass(DB.View3D):
        if not v.IsTemplate:
            return v
    return None


def collect_ducts(doc):
    return list(DB.FilteredElementCollector(doc)
                .OfClass(DB.Mechanical.Duct)
                .WhereElementIsNotElementType())


def collect_pipes(doc):
    return list(DB.FilteredElementCollector(doc)
                .OfClass(DB.Plumbing.Pipe)
                .WhereElementIsNotElementType())


def create_wall_intersector(view3d):
    return DB.ReferenceIntersector(
        DB.ElementClassFilter(DB.Wall),
        DB.FindReferenceTarget.Element,
        view3d
    )


def get_centerline(element):
    """Location line of a duct/pipe, None when the centerline is not straight."""
    loc = getattr(element, 'Location', None)
    curve = getattr(loc, 'Curve', None) if loc else None
    if isinstance(curve, DB.Line):
        return curve
    return None


def centerline_ray(line, transform=None):
    """(origin, direction, length) of the line, mapped by transform if given."""
    origin = line.GetEndPoint(0)
    direction = line.Direction
    if transform is not None:
        origin = transform.OfPoint(origin)
        direction = transform.OfVector(direction)
    return origin, direction, line.Length


def cast_ray(intersector, origin, direction):
    """Raw ReferenceWithContext hits, nearest first."""
    return list(intersector.Find(origin, direction))


def get_diameter(element):
    return float(element.Diameter)


def resolve_wall(doc, hit):
    """(wall, level) behind a hit, (None, None) if the element is not a wall."""
    ref = hit.GetReference()
    wall = doc.GetElement(ref.ElementId)
    if not isinstance(wall, DB.Wall):
        return None, None
    return wall, doc.GetElement(wall.LevelId)


def _require_param(inst, name):
    p = get_param(inst, name)
    if p is None:
        raise HoleParameterError(u'Hole family has no parameter "{0}"'.format(name))
    return p


def create_hole(doc, symbol, wall, level, point, diameter, width_param_name, height_param_name):
    """Place one hole in the wall and size it to the duct/pipe diameter."""
    inst = doc.Create.NewFamilyInstance(
        point,
        symbol,
        wall,
        level,
        DB.Structure.StructuralType.NonStructural
    )

    width, height = hole_domain.hole_size(diameter)
    _require_param(inst, width_param_name).Set(width)
    _require_param(inst, height_param_name).Set(height)

    elev = inst.get_Parameter(DB.BuiltInParameter.INSTANCE_ELEVATION_PARAM)
    if elev is None:
        raise HoleParameterError(u'Hole family has no INSTANCE_ELEVATION_PARAM')
    elev.Set(hole_domain.centered_elevation(elev.AsDouble(), diameter))
    return inst
