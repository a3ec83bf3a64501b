from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from travel_agency.data.database import Base


class CityModel(Base):
    __tablename__ = "cities"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    country = Column(String, nullable=False)

    tours = relationship("TourModel", back_populates="city")
