import httpx

from apps.api.steps import step
from apps.common.endpoint import GenericEndpoint, limit_params, sort_params

from .dtos import UserRequest


class UsersEndpoint(GenericEndpoint):
    """REST calls for the /users resource."""

    collection_path = "/users"
    item_path = "/users/{id}"

    @step("Get all users")
    def list_all(self) -> httpx.Response:
        return super().list_all()

    @step("Get user by ID: {user_id}")
    def get_by_id(self, user_id: int) -> httpx.Response:
        return super().get_by_id(user_id)

    @step("Create new user")
    def create(self, payload: UserRequest) -> httpx.Response:
        return super().create(payload)

    @step("Update user with ID: {user_id}")
    def update(self, user_id: int, payload: UserRequest) -> httpx.Response:
        return super().update(user_id, payload)

    @step("Delete user with ID: {user_id}")
    def delete(self, user_id: int) -> httpx.Response:
        return super().delete(user_id)

    @step("Get limited users: {limit}")
    def limit(self, limit: int) -> httpx.Response:
        return self.query(**limit_params(limit))

    @step("Get sorted users: {order}")
    def sorted_by(self, order: str) -> httpx.Response:
        return self.query(**sort_params(order))

    @step("Get users for user ID: {user_id}")
    def for_user(self, user_id: int) -> httpx.Response:
        return self.query(userId=user_id)
