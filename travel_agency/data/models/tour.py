from sqlalchemy import Column, Integer, ForeignKey, String, Text, Numeric
from sqlalchemy.orm import relationship

from travel_agency.data.database import Base


class TourModel(Base):
    __tablename__ = "tours"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)

    price = Column(Numeric(10, 2), nullable=False)
    duration = Column(Integer, nullable=False)  # dni

    city_id = Column(Integer, ForeignKey("cities.id"), nullable=False)
    hotel_id = Column(Integer, ForeignKey("hotels.id"), nullable=False)
    #klient "na papierze", niezwiazany z koszykiem
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=True)

    city = relationship("CityModel", back_populates="tours")
    hotel = relationship("HotelModel", back_populates="tours")
    client = relationship("ClientModel", back_populates="tours")
