from dataclasses import dataclass
from typing import Optional


@dataclass
class GeolocationDTO:
    lat: Optional[str] = None
    lng: Optional[str] = None


@dataclass
class NameDTO:
    firstname: Optional[str] = None
    lastname: Optional[str] = None


@dataclass
class AddressDTO:
    city: Optional[str] = None
    street: Optional[str] = None
    number: Optional[int] = None
    zipcode: Optional[str] = None
    geolocation: Optional[GeolocationDTO] = None


@dataclass
class UserRequest:
    # 'id' is server-assigned and never sent.
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    name: Optional[NameDTO] = None
    address: Optional[AddressDTO] = None
    phone: Optional[str] = None


@dataclass
class UserResponse:
    id: Optional[int] = None
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    name: Optional[NameDTO] = None
    address: Optional[AddressDTO] = None
    phone: Optional[str] = None

    @property
    def full_name(self) -> Optional[str]:
        if self.name is None:
            return None
        parts = [p for p in (self.name.firstname, self.name.lastname) if p]
        return " ".join(parts) or None
