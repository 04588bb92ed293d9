# config/settings/test.py

import os

# Banco em memória para a suíte, a menos que o ambiente defina outro
os.environ.setdefault('DATABASE_URL', 'sqlite://:memory:')

from .base import *  # noqa: E402

DEBUG = False

ALLOWED_HOSTS = ['testserver', 'localhost']

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',  # Testes mais rápidos
]

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'claquete-test-cache',
    }
}

CHANNEL_LAYERS = {
    'default': {
        'BACKEND': 'channels.layers.InMemoryChannelLayer'
    }
}

STORAGES['staticfiles'] = {
    'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
}

# Desabilitar logs em testes
LOGGING['handlers'] = {
    'null': {'class': 'logging.NullHandler'},
}
LOGGING['root']['handlers'] = ['null']
LOGGING['loggers'] = {
    'django': {'handlers': ['null'], 'propagate': False},
    'apps': {'handlers': ['null'], 'propagate': False},
}
