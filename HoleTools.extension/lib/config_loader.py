# -*- coding: utf-8 -*-
"""Загрузчик конфигурации для Hole Tools.

Загружает правила расстановки отверстий из JSON файла с разумными дефолтами.
"""
import io
import json
import os


# Дефолтные значения (совпадают с config/rules.default.json)
DEFAULT_RULES = {
    'secondary_doc_marker': u'ОВиК',
    'hole_family_name': u'ADSK_ОбобщеннаяМодель_ОтверстиеПрямоугольное_вСтене',
    'hole_type_name': u'Этаж 1_0.000',
    'width_param_name': u'ADSK_Отверстие_Ширина',
    'height_param_name': u'ADSK_Отверстие_Высота',
    'transaction_name': u'Расстановка отверстий',
    'use_link_transform': True,
    'tag_holes': True,
    'swallow_warnings': False,
}


def _extension_root_from_lib():
    """Получить корневую директорию расширения из расположения lib."""
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def get_default_rules_path():
    """Получить путь к файлу конфигурации по умолчанию."""
    return os.path.join(_extension_root_from_lib(), 'config', 'rules.default.json')


def _read_json(rules_path):
    try:
        with io.open(rules_path, 'r', encoding='utf-8') as fp:
            return json.load(fp)
    except ValueError:
        # Файлы, сохранённые из Блокнота, бывают с BOM
        with open(rules_path, 'rb') as fb:
            raw = fb.read()
        return json.loads(raw.decode('utf-8-sig'))


def load_rules(path=None):
    """Загрузить правила из JSON конфигурационного файла.

    Args:
        path: Путь к JSON конфиг-файлу. Если None, используется дефолтный файл правил.

    Returns:
        Словарь со всеми ключами конфигурации, с применёнными дефолтами.

    Raises:
        IOError/OSError: файл не найден.
        ValueError: файл не является корректным JSON.
    """
    rules_path = path or get_default_rules_path()
    return apply_defaults(_read_json(rules_path))


def apply_defaults(data):
    """Дополнить словарь правил недостающими ключами (in place)."""
    if data is None:
        data = {}
    for key, val in DEFAULT_RULES.items():
        if key not in data:
            data[key] = val
    return data
