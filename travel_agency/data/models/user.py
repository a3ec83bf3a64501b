from sqlalchemy import Column, Integer, String
from travel_agency.data.database import Base

ROLE_ADMIN = "admin"
ROLE_CLIENT = "client"


class UserModel(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True)
    username = Column(String(100), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=ROLE_CLIENT)
