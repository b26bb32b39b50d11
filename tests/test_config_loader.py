# -*- coding: utf-8 -*-
import json
import os
import sys
import tempfile
import unittest

ROOT = os.path.dirname(os.path.dirname(__file__))
EXT = os.path.join(ROOT, "HoleTools.extension")
LIB = os.path.join(EXT, "lib")
if LIB not in sys.path:
    sys.path.insert(0, LIB)

import config_loader


def _write(data, encoding='utf-8'):
    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False, encoding=encoding) as f:
        json.dump(data, f, ensure_ascii=False)
        f.flush()
        return f.name


class TestLoadRules(unittest.TestCase):
    def test_load_valid_json(self):
        path = _write({"secondary_doc_marker": "HVAC", "tag_holes": False})
        try:
            result = config_loader.load_rules(path)
            self.assertEqual(result["secondary_doc_marker"], "HVAC")
            self.assertFalse(result["tag_holes"])
        finally:
            os.unlink(path)

    def test_default_values_applied(self):
        path = _write({})
        try:
            result = config_loader.load_rules(path)
            self.assertEqual(result["secondary_doc_marker"], u"ОВиК")
            self.assertEqual(
                result["hole_family_name"],
                u"ADSK_ОбобщеннаяМодель_ОтверстиеПрямоугольное_вСтене",
            )
            self.assertEqual(result["hole_type_name"], u"Этаж 1_0.000")
            self.assertEqual(result["width_param_name"], u"ADSK_Отверстие_Ширина")
            self.assertEqual(result["height_param_name"], u"ADSK_Отверстие_Высота")
            self.assertTrue(result["use_link_transform"])
            self.assertTrue(result["tag_holes"])
            self.assertFalse(result["swallow_warnings"])
        finally:
            os.unlink(path)

    def test_partial_config_gets_defaults(self):
        path = _write({"hole_type_name": u"Тип 2"})
        try:
            result = config_loader.load_rules(path)
            self.assertEqual(result["hole_type_name"], u"Тип 2")
            self.assertEqual(result["transaction_name"], u"Расстановка отверстий")
        finally:
            os.unlink(path)

    def test_utf8_bom(self):
        path = _write({"secondary_doc_marker": u"ОВ"}, encoding='utf-8-sig')
        try:
            result = config_loader.load_rules(path)
            self.assertEqual(result["secondary_doc_marker"], u"ОВ")
        finally:
            os.unlink(path)

    def test_invalid_json_raises(self):
        with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False, encoding='utf-8') as f:
            f.write("{not json")
            path = f.name
        try:
            with self.assertRaises(ValueError):
                config_loader.load_rules(path)
        finally:
            os.unlink(path)

    def test_missing_file_raises(self):
        with self.assertRaises((IOError, OSError)):
            config_loader.load_rules(os.path.join(tempfile.gettempdir(), "no_such_rules.json"))

    def test_load_default_rules_file(self):
        default_path = config_loader.get_default_rules_path()
        self.assertTrue(os.path.exists(default_path))
        result = config_loader.load_rules()
        self.assertEqual(set(config_loader.DEFAULT_RULES), set(result) & set(config_loader.DEFAULT_RULES))

    def test_shipped_file_matches_defaults(self):
        result = config_loader.load_rules()
        for key, val in config_loader.DEFAULT_RULES.items():
            self.assertEqual(result[key], val, key)


class TestApplyDefaults(unittest.TestCase):
    def test_none_gives_full_defaults(self):
        self.assertEqual(config_loader.apply_defaults(None), config_loader.DEFAULT_RULES)

    def test_existing_keys_kept(self):
        data = {"tag_holes": False}
        result = config_loader.apply_defaults(data)
        self.assertIs(result, data)
        self.assertFalse(result["tag_holes"])
        self.assertTrue(result["use_link_transform"])


if __name__ == "__main__":
    unittest.main()
