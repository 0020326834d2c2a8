import os

import django
from django.apps import apps as django_apps

SETTINGS_MODULE = "fakestore.settings"


def setup() -> None:
    """Configure Django for standalone use of the suite.

    Serializers, the JSON parser/renderer and LOGGING all read Django
    settings, so this has to run before any of them is used. Calling it again
    is a no-op.
    """
    if django_apps.ready:
        return
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", SETTINGS_MODULE)
    django.setup()
