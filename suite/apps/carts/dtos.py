from dataclasses import dataclass
from typing import List, Optional


@dataclass
class CartItemDTO:
    product_id: Optional[int] = None
    quantity: Optional[int] = None


@dataclass
class CartRequest:
    # 'id' is server-assigned and never sent.
    user_id: Optional[int] = None
    date: Optional[str] = None
    products: Optional[List[CartItemDTO]] = None


@dataclass
class CartResponse:
    id: Optional[int] = None
    user_id: Optional[int] = None
    date: Optional[str] = None
    products: Optional[List[CartItemDTO]] = None

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity or 0 for item in self.products or [])

    def product_ids(self) -> List[Optional[int]]:
        return [item.product_id for item in self.products or []]
