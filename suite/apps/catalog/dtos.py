from dataclasses import dataclass
from typing import Optional


@dataclass
class RatingDTO:
    rate: Optional[float] = None
    count: Optional[int] = None


@dataclass
class ProductRequest:
    # 'id' is server-assigned and never sent.
    title: Optional[str] = None
    price: Optional[float] = None
    description: Optional[str] = None
    image: Optional[str] = None
    category: Optional[str] = None


@dataclass
class ProductResponse:
    id: Optional[int] = None
    title: Optional[str] = None
    price: Optional[float] = None
    description: Optional[str] = None
    category: Optional[str] = None
    image: Optional[str] = None
    rating: Optional[RatingDTO] = None
