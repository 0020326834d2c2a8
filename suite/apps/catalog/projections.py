"""
Flattened product view and the in-memory filters used by assertions.

Every filter returns a new :class:`ProductCollection` and leaves its input
untouched.
"""
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .dtos import ProductResponse

HIGH_RATING_THRESHOLD = 4.0


@dataclass(frozen=True)
class ProductView:
    product_id: Optional[int] = None
    title: Optional[str] = None
    price: Optional[float] = None
    description: Optional[str] = None
    category: Optional[str] = None
    image: Optional[str] = None
    rating_rate: Optional[float] = None
    rating_count: Optional[int] = None

    @classmethod
    def from_response(cls, product: ProductResponse) -> "ProductView":
        rating = product.rating
        return cls(
            product_id=product.id,
            title=product.title,
            price=product.price,
            description=product.description,
            category=product.category,
            image=product.image,
            rating_rate=rating.rate if rating is not None else None,
            rating_count=rating.count if rating is not None else None,
        )

    def is_in_stock(self) -> bool:
        # The store has no stock level; a product nobody rated counts as unavailable.
        return self.rating_count is not None and self.rating_count > 0

    def is_highly_rated(self) -> bool:
        return self.rating_rate is not None and self.rating_rate >= HIGH_RATING_THRESHOLD


@dataclass(frozen=True)
class ProductCollection:
    products: List[ProductView] = field(default_factory=list)
    category: Optional[str] = None

    @property
    def total_count(self) -> int:
        return len(self.products)

    @classmethod
    def from_responses(cls, responses: Iterable[ProductResponse]) -> "ProductCollection":
        return cls(products=[ProductView.from_response(r) for r in responses])

    def filter_by_category(self, category: str) -> "ProductCollection":
        wanted = category.casefold()
        matches = [
            p for p in self.products
            if p.category is not None and p.category.casefold() == wanted
        ]
        return ProductCollection(products=matches, category=category)

    def filter_by_min_price(self, min_price: float) -> "ProductCollection":
        matches = [p for p in self.products if p.price is not None and p.price >= min_price]
        return ProductCollection(products=matches, category=self.category)

    def highly_rated(self) -> "ProductCollection":
        matches = [p for p in self.products if p.is_highly_rated()]
        return ProductCollection(products=matches, category=self.category)

    def ids(self) -> List[Optional[int]]:
        return [p.product_id for p in self.products]

    def __len__(self) -> int:
        return len(self.products)

    def __iter__(self):
        return iter(self.products)
