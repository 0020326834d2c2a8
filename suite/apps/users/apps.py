from django.apps import AppConfig


class UsersConfig(AppConfig):
    name = 'apps.users'
    label = 'fakestore_users'

    def ready(self):
        # Registers the user JSON shapes.
        from . import mappers  # noqa: F401
