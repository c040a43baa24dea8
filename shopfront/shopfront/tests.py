import importlib
import os
import sys
from unittest import mock

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase

PRODUCTION_SETTINGS = 'shopfront.production_settings'


class ProductionSettingsTests(SimpleTestCase):
    """Production overlay loads on its own and leaves base settings alone."""

    def tearDown(self):
        sys.modules.pop(PRODUCTION_SETTINGS, None)

    def load(self, **env):
        sys.modules.pop(PRODUCTION_SETTINGS, None)
        with mock.patch.dict(os.environ, env, clear=True):
            return importlib.import_module(PRODUCTION_SETTINGS)

    def test_requires_secret_key(self):
        with self.assertRaises(ImproperlyConfigured):
            self.load()

    def test_loads_with_secret_key(self):
        module = self.load(SECRET_KEY='prod-secret', ALLOWED_HOSTS='shop.example.com')

        self.assertFalse(module.DEBUG)
        self.assertEqual(module.ALLOWED_HOSTS, ['shop.example.com'])
        self.assertEqual(
            module.CSRF_TRUSTED_ORIGINS,
            ['http://shop.example.com', 'https://shop.example.com'],
        )
        self.assertEqual(module.SESSION_ENGINE, 'django.contrib.sessions.backends.cached_db')
        self.assertEqual(module.CACHES['default']['LOCATION'], 'redis://localhost:6379/0')

    def test_redis_location(self):
        module = self.load(SECRET_KEY='prod-secret', REDIS_PASSWORD='pw', REDIS_USE_SSL='true')

        self.assertEqual(module._build_redis_location('2'), 'rediss://:pw@localhost:6379/2')
        self.assertEqual(module._build_redis_location('2', 'redis://cache:6379/5'), 'redis://cache:6379/5')

    def test_base_settings_are_not_changed(self):
        module = self.load(SECRET_KEY='prod-secret')

        self.assertEqual(
            module.STORAGES['staticfiles']['BACKEND'],
            'whitenoise.storage.CompressedManifestStaticFilesStorage',
        )
        self.assertEqual(
            settings.STORAGES['staticfiles']['BACKEND'],
            'whitenoise.storage.CompressedStaticFilesStorage',
        )
        self.assertNotEqual(settings.LOGGING['loggers']['django']['level'], 'INFO')
