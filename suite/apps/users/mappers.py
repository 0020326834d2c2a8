from typing import Any, Mapping, Optional

from apps.api import shapes

from .dtos import AddressDTO, GeolocationDTO, NameDTO, UserRequest, UserResponse
from .serializers import (
    AddressSerializer,
    GeolocationSerializer,
    NameSerializer,
    UserRequestSerializer,
    UserResponseSerializer,
)


class GeolocationMapper:
    @staticmethod
    def to_dto(data: Optional[Mapping[str, Any]]) -> Optional[GeolocationDTO]:
        if data is None:
            return None
        lng = data.get("lng")
        if lng is None:
            lng = data.get("long")
        return GeolocationDTO(lat=data.get("lat"), lng=lng)


class NameMapper:
    @staticmethod
    def to_dto(data: Optional[Mapping[str, Any]]) -> Optional[NameDTO]:
        if data is None:
            return None
        return NameDTO(firstname=data.get("firstname"), lastname=data.get("lastname"))


class AddressMapper:
    @staticmethod
    def to_dto(data: Optional[Mapping[str, Any]]) -> Optional[AddressDTO]:
        if data is None:
            return None
        return AddressDTO(
            city=data.get("city"),
            street=data.get("street"),
            number=data.get("number"),
            zipcode=data.get("zipcode"),
            geolocation=GeolocationMapper.to_dto(data.get("geolocation")),
        )


class UserMapper:
    @staticmethod
    def to_dto(data: Mapping[str, Any]) -> UserResponse:
        return UserResponse(
            id=data.get("id"),
            email=data.get("email"),
            username=data.get("username"),
            password=data.get("password"),
            name=NameMapper.to_dto(data.get("name")),
            address=AddressMapper.to_dto(data.get("address")),
            phone=data.get("phone"),
        )

    @staticmethod
    def to_request_dto(data: Mapping[str, Any]) -> UserRequest:
        return UserRequest(
            email=data.get("email"),
            username=data.get("username"),
            password=data.get("password"),
            name=NameMapper.to_dto(data.get("name")),
            address=AddressMapper.to_dto(data.get("address")),
            phone=data.get("phone"),
        )

    @staticmethod
    def to_request(user: UserResponse) -> UserRequest:
        """Build an update payload from a fetched user (id dropped)."""
        return UserRequest(
            email=user.email,
            username=user.username,
            password=user.password,
            name=user.name,
            address=user.address,
            phone=user.phone,
        )


shapes.register(GeolocationDTO, GeolocationSerializer, GeolocationMapper.to_dto)
shapes.register(NameDTO, NameSerializer, NameMapper.to_dto)
shapes.register(AddressDTO, AddressSerializer, AddressMapper.to_dto)
shapes.register(UserResponse, UserResponseSerializer, UserMapper.to_dto)
shapes.register(UserRequest, UserRequestSerializer, UserMapper.to_request_dto, omit_none=True)
