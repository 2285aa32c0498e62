from sqlalchemy import Column, String, Boolean, ForeignKey, Text, Integer, JSON
from sqlalchemy.orm import relationship
from .base import BaseModel, IdType


class Review(BaseModel):
    __tablename__ = "review"
    
    rating = Column(Integer, nullable=False)
    title = Column(String(100), nullable=False)
    comment = Column(Text, nullable=False)
    images = Column(JSON, default=list)
    helpful = Column(Integer, default=0, nullable=False)
    verified = Column(Boolean, default=False, nullable=False)
    
    # Foreign keys
    user_id = Column(IdType, ForeignKey("user.id", ondelete="SET NULL"))
    package_id = Column(IdType, ForeignKey("tour_package.id", ondelete="CASCADE"), index=True)
    destination_id = Column(IdType, ForeignKey("destination.id", ondelete="CASCADE"), index=True)
    
    # Relationships
    user = relationship("User", back_populates="reviews")
    package = relationship("TourPackage", back_populates="reviews")
    destination = relationship("Destination", back_populates="reviews")
