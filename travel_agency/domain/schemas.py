# travel_agency/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from decimal import Decimal


class Credentials(BaseModel):
    """Login / rejestracja."""

    username: str = Field(..., max_length=100)
    password: str


class ProfileUpdate(BaseModel):
    """Zmiana profilu, puste pole = bez zmian."""

    username: Optional[str] = Field(None, max_length=100)
    password: Optional[str] = None


class UserRead(BaseModel):
    id: int
    username: str
    role: str

    model_config = ConfigDict(from_attributes=True)


class SessionData(BaseModel):
    """To co lezy w redisie pod kluczem sesji."""

    user_id: int
    username: str
    role: str


class SessionContext(SessionData):
    """Dane sesji przekazywane jawnie do handlerow."""

    token: str


class CityIn(BaseModel):
    name: str = Field(..., min_length=1)
    country: str = Field(..., min_length=1)


class CityOut(CityIn):
    id: int

    model_config = ConfigDict(from_attributes=True)


class HotelIn(BaseModel):
    name: str = Field(..., min_length=1)
    stars: int = Field(..., ge=1, le=5)
    address: Optional[str] = None


class HotelOut(HotelIn):
    id: int

    model_config = ConfigDict(from_attributes=True)


class ClientIn(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    phone: Optional[str] = None


class ClientOut(ClientIn):
    id: int

    model_config = ConfigDict(from_attributes=True)


class TourIn(BaseModel):
    """Schema dla tworzenia / edycji wycieczki."""

    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    price: Decimal = Field(..., ge=0, decimal_places=2)
    duration: int = Field(..., gt=0, description="Liczba dni")
    city_id: int
    hotel_id: int
    client_id: Optional[int] = None


class TourOut(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    duration: int
    city: CityOut
    hotel: HotelOut
    client: Optional[ClientOut] = None

    model_config = ConfigDict(from_attributes=True)


class CartLineOut(BaseModel):
    id: int
    tour_id: int
    tour_name: str
    price: Decimal
    quantity: int
    line_total: Decimal


class CartOut(BaseModel):
    """Widok koszyka, total liczony przy odczycie."""

    user_id: int
    lines: List[CartLineOut]
    total: Decimal


class CartActionOut(BaseModel):
    success: bool
    message: str
    line_id: Optional[int] = None
    quantity: Optional[int] = None


class FormOut(BaseModel):
    form: str
    fields: List[str]
    action: str
