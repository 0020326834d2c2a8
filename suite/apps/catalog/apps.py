from django.apps import AppConfig


class CatalogConfig(AppConfig):
    name = 'apps.catalog'
    label = 'fakestore_catalog'

    def ready(self):
        # Registers the product JSON shapes.
        from . import mappers  # noqa: F401
