# -*- coding: utf-8 -*-
"""Поиск смежного документа (ОВиК) и связи Revit, через которую он загружен.

Если связь ОВиК размещена в модели несколько раз, используется первый
экземпляр связи; об остальных пишется предупреждение в лог.
"""

from pyrevit import DB

from utils_revit import get_logger


def list_link_instances(doc):
    return list(DB.FilteredElementCollector(doc)
                .OfClass(DB.RevitLinkInstance)
                .WhereElementIsNotElementType()
                .ToElements())


def is_link_loaded(link_instance):
    try:
        return link_instance.GetLinkDocument() is not None
    except Exception:
        return False


def get_link_doc(link_instance):
    try:
        return link_instance.GetLinkDocument()
    except Exception:
        return None


def get_total_transform(link_instance):
    if link_instance is None:
        return DB.Transform.Identity
    try:
        t = link_instance.GetTotalTransform()
        return t if t else DB.Transform.Identity
    except Exception:
        return DB.Transform.Identity


def get_doc_title(doc):
    try:
        return doc.Title or u''
    except Exception:
        return u''


def iter_open_documents(doc):
    """Все документы, открытые в приложении (включая загруженные связи)."""
    if doc is None:
        return
    app = getattr(doc, 'Application', None)
    if app is None:
        return
    for d in app.Documents:
        yield d


def find_document_by_title(doc, marker):
    """Первый открытый документ, в названии которого есть `marker`.

    Порядок определяется перечислением приложения. Пустой маркер ничего не находит.
    """
    if not marker:
        return None
    for d in iter_open_documents(doc):
        if marker in get_doc_title(d):
            return d
    return None


def find_link_instance(host_doc, link_doc):
    """Экземпляр связи в host_doc, чей загруженный документ - link_doc."""
    if host_doc is None or link_doc is None:
        return None
    title = get_doc_title(link_doc)
    matches = []
    for link_inst in list_link_instances(host_doc):
        if not is_link_loaded(link_inst):
            continue
        ld = get_link_doc(link_inst)
        if ld is link_doc or get_doc_title(ld) == title:
            matches.append(link_inst)
    if not matches:
        return None
    if len(matches) > 1:
        get_logger().warning(
            u"Связь '{0}' размещена {1} раз(а), используется первый экземпляр".format(
                title, len(matches)))
    return matches[0]


def get_document_transform(host_doc, other_doc):
    """Преобразование координат other_doc в координаты host_doc.

    Если other_doc не загружен связью, координаты считаются общими (Identity).
    """
    return get_total_transform(find_link_instance(host_doc, other_doc))
