import httpx

from apps.api.steps import step
from apps.common.endpoint import GenericEndpoint, limit_params, sort_params

from .dtos import CartRequest
from .utils import DateLike, format_query_date


class CartsEndpoint(GenericEndpoint):
    """REST calls for the /carts resource."""

    collection_path = "/carts"
    item_path = "/carts/{id}"
    user_carts_path = "/carts/user/{user_id}"

    @step("Get all carts")
    def list_all(self) -> httpx.Response:
        return super().list_all()

    @step("Get cart by ID: {cart_id}")
    def get_by_id(self, cart_id: int) -> httpx.Response:
        return super().get_by_id(cart_id)

    @step("Get carts for user ID: {user_id}")
    def for_user(self, user_id: int) -> httpx.Response:
        return self.client.get(self.user_carts_path, path_params={"user_id": user_id})

    @step("Create new cart")
    def create(self, payload: CartRequest) -> httpx.Response:
        return super().create(payload)

    @step("Update cart with ID: {cart_id}")
    def update(self, cart_id: int, payload: CartRequest) -> httpx.Response:
        return super().update(cart_id, payload)

    @step("Delete cart with ID: {cart_id}")
    def delete(self, cart_id: int) -> httpx.Response:
        return super().delete(cart_id)

    @step("Get carts between {start} and {end}")
    def between_dates(self, start: DateLike, end: DateLike) -> httpx.Response:
        return self.query(startdate=format_query_date(start), enddate=format_query_date(end))

    @step("Get limited carts: {limit}")
    def limit(self, limit: int) -> httpx.Response:
        return self.query(**limit_params(limit))

    @step("Get sorted carts: {order}")
    def sorted_by(self, order: str) -> httpx.Response:
        return self.query(**sort_params(order))
