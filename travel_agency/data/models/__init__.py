#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from travel_agency.data.models.user import UserModel
from travel_agency.data.models.city import CityModel
from travel_agency.data.models.hotel import HotelModel
from travel_agency.data.models.client import ClientModel
from travel_agency.data.models.tour import TourModel
from travel_agency.data.models.cart import CartModel
from travel_agency.data.models.cart_item import CartItemModel

__all__ = [
    "UserModel",
    "CityModel",
    "HotelModel",
    "ClientModel",
    "TourModel",
    "CartModel",
    "CartItemModel",
]
