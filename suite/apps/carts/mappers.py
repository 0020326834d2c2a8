from typing import Any, Iterable, List, Mapping, Optional

from apps.api import shapes

from .dtos import CartItemDTO, CartRequest, CartResponse
from .serializers import CartItemSerializer, CartRequestSerializer, CartResponseSerializer


class CartItemMapper:
    @staticmethod
    def to_dto(data: Mapping[str, Any]) -> CartItemDTO:
        return CartItemDTO(product_id=data.get("product_id"), quantity=data.get("quantity"))

    @staticmethod
    def many_to_dto(items: Optional[Iterable[Mapping[str, Any]]]) -> Optional[List[CartItemDTO]]:
        if items is None:
            return None
        return [CartItemMapper.to_dto(i) for i in items]


class CartMapper:
    @staticmethod
    def to_dto(data: Mapping[str, Any]) -> CartResponse:
        return CartResponse(
            id=data.get("id"),
            user_id=data.get("user_id"),
            date=data.get("date"),
            products=CartItemMapper.many_to_dto(data.get("products")),
        )

    @staticmethod
    def to_request_dto(data: Mapping[str, Any]) -> CartRequest:
        return CartRequest(
            user_id=data.get("user_id"),
            date=data.get("date"),
            products=CartItemMapper.many_to_dto(data.get("products")),
        )


shapes.register(CartItemDTO, CartItemSerializer, CartItemMapper.to_dto)
shapes.register(CartResponse, CartResponseSerializer, CartMapper.to_dto)
shapes.register(CartRequest, CartRequestSerializer, CartMapper.to_request_dto, omit_none=True)
