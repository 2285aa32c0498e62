from sqlalchemy import Column, String, Boolean, Text, Float, Integer, JSON, Index
from sqlalchemy.orm import relationship
from .base import BaseModel


class Destination(BaseModel):
    __tablename__ = "destination"
    __table_args__ = (
        Index("ix_destination_region_featured", "region", "featured"),
        Index("ix_destination_country_region", "country", "region"),
    )
    
    name = Column(String(100), nullable=False)
    country = Column(String(50), nullable=False)
    region = Column(String(20), nullable=False)
    description = Column(Text, nullable=False)
    images = Column(JSON, default=list)
    highlights = Column(JSON, default=list)
    best_time_to_visit = Column(String(100), nullable=False)
    average_rating = Column(Float, default=0, nullable=False, index=True)
    review_count = Column(Integer, default=0, nullable=False)
    starting_price = Column(Float, nullable=False, index=True)
    currency = Column(String(3), nullable=False, default="USD")
    tags = Column(JSON, default=list)  # lowercase, e.g. ["beach", "culture"]
    coordinates = Column(JSON, nullable=False)  # {"lat": -8.34, "lng": 115.09}
    featured = Column(Boolean, default=False, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    
    # Relationships
    reviews = relationship("Review", back_populates="destination", cascade="all, delete-orphan")


REGIONS = ("Asia", "Europe", "North America", "South America", "Africa", "Oceania")
