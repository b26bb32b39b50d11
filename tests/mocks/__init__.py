# -*- coding: utf-8 -*-
"""Mock modules for testing Revit-dependent code without Revit."""

from .revit_api import (
    DB,
    MockApplication,
    MockDocument,
    MockFamilySymbol,
    MockLevel,
    MockRevitLinkInstance,
    MockTransform,
    MockView3D,
    mock_duct,
    mock_element,
    mock_hit,
    mock_pipe,
    mock_wall,
    mock_xyz,
)

__all__ = [
    "DB",
    "MockApplication",
    "MockDocument",
    "MockFamilySymbol",
    "MockLevel",
    "MockRevitLinkInstance",
    "MockTransform",
    "MockView3D",
    "mock_duct",
    "mock_element",
    "mock_hit",
    "mock_pipe",
    "mock_wall",
    "mock_xyz",
]
