# -*- coding: utf-8 -*-
"""Удаление отверстий, расставленных автоматически (метка AUTO_HOLE).

Пользователь выбирает, какие отверстия удалить: по воздуховодам,
по трубам или все сразу.
"""
from pyrevit import forms, revit, script

import rollback_utils
from utils_revit import log_exception

# Get current document
doc = revit.doc
output = script.get_output()

TOOL_DISPLAY = {
    "DUCT": u"Отверстия по воздуховодам",
    "PIPE": u"Отверстия по трубам",
}
ALL_LABEL = u"--- ВСЕ ОТВЕРСТИЯ ({} шт.) ---"


def main():
    tags = rollback_utils.get_unique_tags(doc)

    if not tags:
        forms.alert(
            u"Не найдено отверстий с меткой AUTO_HOLE.\n\n"
            u"Возможно, автоматическая расстановка ещё не выполнялась.",
            title=u"Нет элементов для удаления",
            warn_icon=False
        )
        return

    total_count = sum(count for _, count in tags)

    options = {}
    for tag, count in tags:
        parts = tag.split(":")
        tool_name = parts[1] if len(parts) > 1 else "UNKNOWN"
        label = u"{} ({} шт.)".format(TOOL_DISPLAY.get(tool_name, tool_name), count)
        options[label] = tool_name

    all_label = ALL_LABEL.format(total_count)
    selected = forms.SelectFromList.show(
        list(options.keys()) + [all_label],
        title=u"Выберите отверстия для удаления",
        button_name=u"Удалить",
        multiselect=True
    )

    if not selected:
        return

    output.print_md(u"# Удаление автоматических отверстий")

    if all_label in selected:
        confirm = forms.alert(
            u"Удалить ВСЕ {} отверстий?\n\n"
            u"Это действие можно отменить через Ctrl+Z до сохранения файла.".format(total_count),
            title=u"Подтверждение удаления",
            yes=True,
            no=True,
            warn_icon=True
        )
        if not confirm:
            return
        deleted = rollback_utils.delete_all_auto_holes(doc)
    else:
        deleted = 0
        for label in selected:
            deleted += rollback_utils.delete_by_tool(doc, options[label])

    output.print_md(u"**Удалено отверстий:** {}".format(deleted))
    forms.alert(u"Удалено {} отверстий.".format(deleted), title=u"Готово", warn_icon=False)


try:
    main()
except Exception:
    log_exception('Error in AUTO_HOLE cleanup')
    forms.alert(u"Ошибка удаления. Подробности в окне вывода pyRevit.", title=u"Ошибка")
