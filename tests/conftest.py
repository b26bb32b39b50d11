# -*- coding: utf-8 -*-
"""Pytest fixtures for Hole Tools tests."""
import json
import os
import sys
import tempfile
import types
from unittest.mock import MagicMock

import pytest

ROOT = os.path.dirname(os.path.dirname(__file__))
EXT = os.path.join(ROOT, "HoleTools.extension")
LIB = os.path.join(EXT, "lib")
if LIB not in sys.path:
    sys.path.insert(0, LIB)


if "pyrevit" not in sys.modules:
    pyrevit_stub = types.ModuleType("pyrevit")
    from mocks.revit_api import DB as MockDB
    pyrevit_stub.DB = MockDB
    pyrevit_stub.forms = MagicMock()
    pyrevit_stub.revit = MagicMock()
    pyrevit_stub.script = MagicMock()
    sys.modules["pyrevit"] = pyrevit_stub


from mocks.revit_api import (  # noqa: E402
    MockApplication,
    MockDocument,
    MockFamilySymbol,
    MockLevel,
    MockRevitLinkInstance,
    MockView3D,
)

FAMILY_NAME = u"ADSK_ОбобщеннаяМодель_ОтверстиеПрямоугольное_вСтене"
TYPE_NAME = u"Этаж 1_0.000"
WIDTH = u"ADSK_Отверстие_Ширина"
HEIGHT = u"ADSK_Отверстие_Высота"
DEFAULT_ELEVATION = 10.0


@pytest.fixture
def temp_config_file():
    """Create a temporary config file and return its path. Cleans up after test."""
    files = []

    def _create(data):
        f = tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False, encoding='utf-8')
        json.dump(data, f, ensure_ascii=False)
        f.flush()
        f.close()
        files.append(f.name)
        return f.name

    yield _create

    for path in files:
        try:
            os.unlink(path)
        except OSError:
            pass


@pytest.fixture
def rules():
    """Rules matching the shipped defaults, without touching the file system."""
    import config_loader
    return config_loader.apply_defaults({})


def hole_symbol(element_id=500, parameters=None, **kwargs):
    """Hole family type with the width/height instance parameters."""
    if parameters is None:
        parameters = {WIDTH: 0.0, HEIGHT: 0.0}
    return MockFamilySymbol(
        element_id,
        kwargs.pop("family_name", FAMILY_NAME),
        kwargs.pop("type_name", TYPE_NAME),
        instance_parameters=parameters,
        elevation=DEFAULT_ELEVATION,
        **kwargs
    )


@pytest.fixture
def make_symbol():
    return hole_symbol


@pytest.fixture
def build_model():
    """Factory: host (architecture) and HVAC documents open in one application.

    The host gets a level, the hole family type and a 3D view unless told
    otherwise. `walls` are built against the level; `link_transform` loads
    the HVAC document into the host as a link with that transform.
    """

    def _build(
        walls=None,
        ducts=None,
        pipes=None,
        symbol="default",
        with_view=True,
        hvac_title=u"Проект_ОВиК",
        link_transform=None,
    ):
        level = MockLevel(1, "Этаж 1")
        host = MockDocument(u"Проект_АР", [level])
        for make_wall in walls or []:
            host.add(make_wall(level))
        if symbol == "default":
            symbol = hole_symbol()
        if symbol is not None:
            host.add(symbol)
        view = None
        if with_view:
            host.add(MockView3D(900, "{3D} template", is_template=True))
            view = host.add(MockView3D(901))

        hvac = MockDocument(hvac_title, list(ducts or []) + list(pipes or []))
        app = MockApplication([host, hvac])
        if link_transform is not None:
            host.add(MockRevitLinkInstance(700, hvac, link_transform))

        return types.SimpleNamespace(
            host=host, hvac=hvac, app=app, level=level, symbol=symbol, view=view
        )

    return _build
