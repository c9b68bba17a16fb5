import os
import unittest
from unittest import mock

from cflow2puml.config.settings import read_encoding_setting, read_positive_int_setting

SETTINGS_LOGGER = "cflow2puml.config.settings"


class TestEnvironmentSettings(unittest.TestCase):
    def test_indent_unit_from_environment(self):
        with mock.patch.dict(os.environ, {"CFLOW2PUML_INDENT_UNIT": "2"}):
            self.assertEqual(read_positive_int_setting("CFLOW2PUML_INDENT_UNIT", 4), 2)

    def test_indent_unit_unset(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(read_positive_int_setting("CFLOW2PUML_INDENT_UNIT", 4), 4)

    def test_non_numeric_indent_unit_falls_back(self):
        with mock.patch.dict(os.environ, {"CFLOW2PUML_INDENT_UNIT": "four"}):
            with self.assertLogs(SETTINGS_LOGGER, level="WARNING") as logs:
                value = read_positive_int_setting("CFLOW2PUML_INDENT_UNIT", 4)
        self.assertEqual(value, 4)
        self.assertIn("CFLOW2PUML_INDENT_UNIT", logs.output[0])

    def test_non_positive_indent_unit_falls_back(self):
        with mock.patch.dict(os.environ, {"CFLOW2PUML_INDENT_UNIT": "0"}):
            with self.assertLogs(SETTINGS_LOGGER, level="WARNING"):
                self.assertEqual(read_positive_int_setting("CFLOW2PUML_INDENT_UNIT", 4), 4)

    def test_known_encoding(self):
        with mock.patch.dict(os.environ, {"CFLOW2PUML_ENCODING": "latin-1"}):
            self.assertEqual(read_encoding_setting("CFLOW2PUML_ENCODING", "utf-8"), "latin-1")

    def test_unknown_encoding_falls_back(self):
        with mock.patch.dict(os.environ, {"CFLOW2PUML_ENCODING": "bogus"}):
            with self.assertLogs(SETTINGS_LOGGER, level="WARNING") as logs:
                value = read_encoding_setting("CFLOW2PUML_ENCODING", "utf-8")
        self.assertEqual(value, "utf-8")
        self.assertIn("bogus", logs.output[0])


if __name__ == '__main__':
    unittest.main()
