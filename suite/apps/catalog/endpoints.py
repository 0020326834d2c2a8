import httpx

from apps.api.steps import step
from apps.common.endpoint import GenericEndpoint, limit_params, sort_params

from .dtos import ProductRequest


class ProductsEndpoint(GenericEndpoint):
    """REST calls for the /products resource and its category listings."""

    collection_path = "/products"
    item_path = "/products/{id}"
    categories_path = "/products/categories"
    category_path = "/products/category/{category}"

    @step("Get all products")
    def list_all(self) -> httpx.Response:
        return super().list_all()

    @step("Get product by ID: {product_id}")
    def get_by_id(self, product_id: int) -> httpx.Response:
        return super().get_by_id(product_id)

    @step("Create new product")
    def create(self, payload: ProductRequest) -> httpx.Response:
        return super().create(payload)

    @step("Update product with ID: {product_id}")
    def update(self, product_id: int, payload: ProductRequest) -> httpx.Response:
        return super().update(product_id, payload)

    @step("Partially update product with ID: {product_id}")
    def patch(self, product_id: int, payload: ProductRequest) -> httpx.Response:
        return self.partial_update(product_id, payload)

    @step("Delete product with ID: {product_id}")
    def delete(self, product_id: int) -> httpx.Response:
        return super().delete(product_id)

    @step("Get all product categories")
    def categories(self) -> httpx.Response:
        return self.client.get(self.categories_path)

    @step("Get products in category: {category}")
    def in_category(self, category: str) -> httpx.Response:
        return self.client.get(self.category_path, path_params={"category": category})

    @step("Get limited products: {limit}")
    def limit(self, limit: int) -> httpx.Response:
        return self.query(**limit_params(limit))

    @step("Get sorted products: {order}")
    def sorted_by(self, order: str) -> httpx.Response:
        return self.query(**sort_params(order))
