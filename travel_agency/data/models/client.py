from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from travel_agency.data.database import Base


class ClientModel(Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=True)

    tours = relationship("TourModel", back_populates="client")
