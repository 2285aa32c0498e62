from sqlalchemy import Column, String, Boolean, JSON
from sqlalchemy.orm import relationship
from .base import BaseModel


class User(BaseModel):
    __tablename__ = "user"
    
    name = Column(String(50), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    phone = Column(String(50))
    avatar = Column(String(500))
    role = Column(String(20), default="user")  # user or admin
    is_active = Column(Boolean, default=True)
    preferences = Column(JSON)  # {"destinations": [], "budget": {"min", "max"}, "travelStyle": []}
    
    # Relationships
    bookings = relationship("Booking", back_populates="user")
    reviews = relationship("Review", back_populates="user")
