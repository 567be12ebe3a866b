import importlib
import os
from unittest.mock import patch

from django.test import SimpleTestCase


class DevSettingsTest(SimpleTestCase):
    """Test cases for the development logging configuration"""

    def load(self, **env):
        with patch.dict(os.environ, env):
            module = importlib.import_module('northwind.settings.dev')
            return importlib.reload(module)

    def test_logs_to_file_under_log_dir(self):
        dev = self.load()
        self.assertEqual(dev.LOGGING['handlers']['file']['filename'], dev.LOG_DIR / 'debug.log')
        self.assertTrue(dev.LOG_DIR.is_dir())
        self.assertEqual(dev.LOGGING['loggers']['products']['level'], 'DEBUG')

    def test_sql_logging_off_by_default(self):
        dev = self.load(SQL_DEBUG='false')
        self.assertEqual(dev.LOGGING['loggers']['django.db.backends']['level'], 'INFO')

    def test_sql_logging_switch(self):
        dev = self.load(SQL_DEBUG='true')
        self.assertTrue(dev.SQL_DEBUG)
        self.assertEqual(dev.LOGGING['loggers']['django.db.backends']['level'], 'DEBUG')
