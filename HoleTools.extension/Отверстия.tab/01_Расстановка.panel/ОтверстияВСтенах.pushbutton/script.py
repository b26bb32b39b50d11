# -*- coding: utf-8 -*-
"""Отверстия в стенах по воздуховодам и трубам ОВиК."""

__title__ = u'Отверстия\nв стенах'

from pyrevit import revit, script

import hole_placement


def main():
    output = script.get_output()
    result = hole_placement.execute(revit.doc, output=output)
    if result == hole_placement.Result.CANCELLED:
        output.print_md(u'**Отменено.**')
    return result


if __name__ == '__main__':
    main()
