from sqlalchemy import Column, String, Boolean, Text, Float, Integer, JSON, Index
from sqlalchemy.orm import relationship
from .base import BaseModel


class TourPackage(BaseModel):
    __tablename__ = "tour_package"
    __table_args__ = (
        Index("ix_tour_package_category_featured", "category", "featured"),
    )
    
    title = Column(String(200), nullable=False)
    destination = Column(String(100), nullable=False)  # free text, not a foreign key
    duration = Column(String(100), nullable=False)
    price = Column(Float, nullable=False, index=True)
    original_price = Column(Float)
    currency = Column(String(3), nullable=False, default="USD")
    description = Column(Text, nullable=False)
    highlights = Column(JSON, default=list)
    inclusions = Column(JSON, default=list)
    exclusions = Column(JSON, default=list)
    difficulty = Column(String(20), nullable=False)  # Easy, Moderate, Challenging
    group_size = Column(JSON, nullable=False)  # {"min": 2, "max": 15}
    departure_date = Column(String(20), nullable=False)
    available_dates = Column(JSON, default=list)
    category = Column(String(50), nullable=False)
    itinerary = Column(JSON, default=list)  # ordered day entries
    images = Column(JSON, default=list)
    featured = Column(Boolean, default=False, nullable=False)
    rating = Column(Float, default=0, nullable=False, index=True)
    review_count = Column(Integer, default=0, nullable=False)
    
    # Relationships
    reviews = relationship("Review", back_populates="package", cascade="all, delete-orphan")
    # bookings outlive the package; deleting it only detaches them
    bookings = relationship("Booking", back_populates="package")
    
    @property
    def discount_percentage(self) -> int:
        if self.original_price and self.original_price > self.price:
            return round((self.original_price - self.price) / self.original_price * 100)
        return 0


CURRENCIES = ("USD", "EUR", "GBP", "JPY", "AUD", "CAD")
DIFFICULTIES = ("Easy", "Moderate", "Challenging")
PACKAGE_CATEGORIES = ("Adventure", "Cultural", "Relaxation", "Wildlife", "Honeymoon", "Family", "Luxury")
MEALS = ("Breakfast", "Lunch", "Dinner", "Snacks")
