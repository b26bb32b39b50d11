# -*- coding: utf-8 -*-

"""Hole Tools shared library.

This folder is auto-added to sys.path by pyRevit for this extension.
Keep modules dependency-free (pyRevit + RevitAPI only).

Modules:
    utils_units: Unit conversion between feet and mm for reports
    config_loader: Configuration file loading
    link_reader: Secondary (HVAC) document and Revit link lookup
    hole_domain: Ray hit clipping, deduplication and placement math
    hole_adapters: Revit API access for holes (lookups, ray cast, creation)
    hole_placement: Command flow of the hole placement button
    rollback_utils: Finding and deleting AUTO_HOLE elements
"""

__version__ = "0.1.0"
__author__ = "Hole Tools Team"
