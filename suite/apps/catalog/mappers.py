from typing import Any, Mapping, Optional

from apps.api import shapes

from .dtos import ProductRequest, ProductResponse, RatingDTO
from .serializers import (
    ProductRequestSerializer,
    ProductResponseSerializer,
    RatingSerializer,
)


class RatingMapper:
    @staticmethod
    def to_dto(data: Optional[Mapping[str, Any]]) -> Optional[RatingDTO]:
        if data is None:
            return None
        return RatingDTO(rate=data.get("rate"), count=data.get("count"))


class ProductMapper:
    @staticmethod
    def to_dto(data: Mapping[str, Any]) -> ProductResponse:
        return ProductResponse(
            id=data.get("id"),
            title=data.get("title"),
            price=data.get("price"),
            description=data.get("description"),
            category=data.get("category"),
            image=data.get("image"),
            rating=RatingMapper.to_dto(data.get("rating")),
        )

    @staticmethod
    def to_request_dto(data: Mapping[str, Any]) -> ProductRequest:
        return ProductRequest(
            title=data.get("title"),
            price=data.get("price"),
            description=data.get("description"),
            image=data.get("image"),
            category=data.get("category"),
        )

    @staticmethod
    def to_request(product: ProductResponse) -> ProductRequest:
        return ProductRequest(
            title=product.title,
            price=product.price,
            description=product.description,
            image=product.image,
            category=product.category,
        )


shapes.register(RatingDTO, RatingSerializer, RatingMapper.to_dto)
shapes.register(ProductResponse, ProductResponseSerializer, ProductMapper.to_dto)
shapes.register(
    ProductRequest, ProductRequestSerializer, ProductMapper.to_request_dto, omit_none=True
)
