from django.apps import AppConfig


class CartsConfig(AppConfig):
    name = 'apps.carts'
    label = 'fakestore_carts'

    def ready(self):
        # Registers the cart JSON shapes.
        from . import mappers  # noqa: F401
