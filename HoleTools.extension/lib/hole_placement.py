# -*- coding: utf-8 -*-
"""Расстановка отверстий в стенах АР по воздуховодам и трубам ОВиК.

Порядок работы:
1. Найти документ ОВиК, тип семейства отверстия и 3D вид (иначе - отмена).
2. Собрать воздуховоды и трубы ОВиК.
3. Транзакция 1: активировать тип семейства.
4. Транзакция 2: для каждого элемента пустить луч по оси, отбросить
   пересечения дальше длины элемента и повторы одной стены, создать отверстия.

Ошибка внутри транзакции 2 откатывает все отверстия запуска.
"""

import config_loader
import hole_adapters
import hole_domain
import link_reader
import rollback_utils
from utils_revit import alert, ensure_symbol_active, get_logger, get_output, log_exception, set_comments, tx
from utils_units import format_mm


class Result(object):
    """Статус выполнения команды (как Autodesk.Revit.UI.Result)."""

    SUCCEEDED = 'Succeeded'
    CANCELLED = 'Cancelled'
    FAILED = 'Failed'


DIALOG_TITLE = u'Ошибка'
MSG_NO_SECONDARY_DOC = u'Не найден ОВиК файл'
MSG_NO_FAMILY = u'Не найдено семейство отверстия'
MSG_NO_3D_VIEW = u'Не найден 3D вид'
MSG_FAILED = u'Ошибка расстановки отверстий. Подробности в окне вывода pyRevit.'

KIND_DUCT = 'DUCT'
KIND_PIPE = 'PIPE'


def new_stats():
    return {
        'result': None,
        'ducts': 0,
        'pipes': 0,
        'hits_raw': 0,
        'hits_beyond_length': 0,
        'hits_duplicate': 0,
        'skipped_not_wall': 0,
        'skipped_curved': 0,
        'created': 0,
        'stamp': None,
    }


def _cancel(stats, message):
    alert(message, title=DIALOG_TITLE)
    stats['result'] = Result.CANCELLED
    return stats


def place_holes_for_element(doc, element, kind, ctx, stats):
    """Все отверстия одного воздуховода/трубы. Вызывать внутри транзакции."""
    logger = get_logger()

    line = hole_adapters.get_centerline(element)
    if line is None:
        logger.warning(u'{0} {1}: ось не прямая, пропуск'.format(kind, element.Id))
        stats['skipped_curved'] += 1
        return []

    origin, direction, length = hole_adapters.centerline_ray(line, ctx['transform'])
    raw = hole_adapters.cast_ray(ctx['intersector'], origin, direction)
    hits, beyond, dupes = hole_domain.split_hits(raw, length)
    stats['hits_raw'] += len(raw)
    stats['hits_beyond_length'] += beyond
    stats['hits_duplicate'] += dupes

    if not hits:
        return []

    diameter = hole_adapters.get_diameter(element)
    rules = ctx['rules']
    created = []
    for hit in hits:
        wall, level = hole_adapters.resolve_wall(doc, hit)
        if wall is None:
            logger.warning(u'{0} {1}: пересечение не со стеной, пропуск'.format(kind, element.Id))
            stats['skipped_not_wall'] += 1
            continue

        point = hole_domain.hole_point(origin, direction, hit.Proximity)
        inst = hole_adapters.create_hole(
            doc,
            ctx['symbol'],
            wall,
            level,
            point,
            diameter,
            rules['width_param_name'],
            rules['height_param_name'],
        )
        if ctx['tags']:
            set_comments(inst, ctx['tags'][kind])
        logger.debug(u'{0} {1}: отверстие {2} мм в стене {3}'.format(
            kind, element.Id, format_mm(diameter), wall.Id))
        created.append(inst)

    stats['created'] += len(created)
    return created


def run(doc, rules=None, output=None):
    """Основной сценарий. Ошибки Revit API пробрасываются наружу.

    Returns:
        dict: статистика (см. new_stats), 'result' - значение Result.
    """
    rules = config_loader.apply_defaults(dict(rules)) if rules else config_loader.load_rules()
    stats = new_stats()

    ovk_doc = link_reader.find_document_by_title(doc, rules['secondary_doc_marker'])
    if ovk_doc is None:
        return _cancel(stats, MSG_NO_SECONDARY_DOC)

    symbol = hole_adapters.find_hole_symbol(doc, rules['hole_family_name'], rules['hole_type_name'])
    if symbol is None:
        return _cancel(stats, MSG_NO_FAMILY)

    ducts = hole_adapters.collect_ducts(ovk_doc)
    pipes = hole_adapters.collect_pipes(ovk_doc)
    stats['ducts'] = len(ducts)
    stats['pipes'] = len(pipes)

    view3d = hole_adapters.find_3d_view(doc)
    if view3d is None:
        return _cancel(stats, MSG_NO_3D_VIEW)

    transform = None
    if rules.get('use_link_transform'):
        transform = link_reader.get_document_transform(doc, ovk_doc)

    tags = None
    if rules.get('tag_holes'):
        stamp = rollback_utils.new_timestamp()
        tags = {
            KIND_DUCT: rollback_utils.generate_tag(KIND_DUCT, timestamp=stamp),
            KIND_PIPE: rollback_utils.generate_tag(KIND_PIPE, timestamp=stamp),
        }
        stats['stamp'] = stamp

    ctx = {
        'rules': rules,
        'symbol': symbol,
        'intersector': hole_adapters.create_wall_intersector(view3d),
        'transform': transform,
        'tags': tags,
    }

    name = rules['transaction_name']
    with tx(name, doc=doc):
        ensure_symbol_active(doc, symbol)

    with tx(name, doc=doc, swallow_warnings=bool(rules.get('swallow_warnings'))):
        for d in ducts:
            place_holes_for_element(doc, d, KIND_DUCT, ctx, stats)
        for p in pipes:
            place_holes_for_element(doc, p, KIND_PIPE, ctx, stats)

    stats['result'] = Result.SUCCEEDED
    # holes are committed at this point, the report must not change the result
    try:
        print_report(output, stats, ovk_doc)
    except Exception:
        log_exception('Error printing hole report')
    return stats


def execute(doc, rules=None, output=None):
    """Точка входа кнопки: любая ошибка -> лог, сообщение, Result.FAILED."""
    try:
        return run(doc, rules=rules, output=output)['result']
    except Exception:
        log_exception('Error in hole placement')
        alert(MSG_FAILED, title=DIALOG_TITLE)
        return Result.FAILED


def print_report(output, stats, ovk_doc=None):
    output = output or get_output()
    output.print_md(u'# Расстановка отверстий')
    if ovk_doc is not None:
        output.print_md(u'•Документ ОВиК: `{0}`'.format(link_reader.get_doc_title(ovk_doc)))
    output.print_md(u'•Воздуховодов: {0}, труб: {1}'.format(stats['ducts'], stats['pipes']))
    output.print_md(u'•Пересечений со стенами: {0}'.format(stats['hits_raw']))
    output.print_md(u'•Отброшено (дальше длины элемента): {0}'.format(stats['hits_beyond_length']))
    output.print_md(u'•Отброшено (повтор той же стены): {0}'.format(stats['hits_duplicate']))
    output.print_md(u'•Пропущено (ось не прямая): {0}'.format(stats['skipped_curved']))
    output.print_md(u'•Пропущено (не стена): {0}'.format(stats['skipped_not_wall']))
    output.print_md(u'**Создано отверстий: {0}**'.format(stats['created']))
    if stats.get('stamp'):
        output.print_md(u'•Метка запуска: `{0}`'.format(stats['stamp']))
