"""
Django settings for the northwind project.

This package contains environment-specific settings:
- base.py: Common settings for all environments
- dev.py: Development environment settings
- prod.py: Production environment settings
- test.py: Test run settings (in-memory SQLite)

Usage:
    Set DJANGO_ENV, or point DJANGO_SETTINGS_MODULE straight at a module:
    - Development: northwind.settings.dev
    - Production: northwind.settings.prod
    - Tests: northwind.settings.test
"""

import os

# Default to development settings if not specified
environment = os.getenv('DJANGO_ENV', 'dev')

if environment == 'prod':
    from .prod import *
elif environment == 'test':
    from .test import *
else:
    from .dev import *
