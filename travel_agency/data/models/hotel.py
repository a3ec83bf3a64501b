from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from travel_agency.data.database import Base


class HotelModel(Base):
    __tablename__ = "hotels"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    stars = Column(Integer, nullable=False)
    address = Column(String, nullable=True)

    tours = relationship("TourModel", back_populates="hotel")
