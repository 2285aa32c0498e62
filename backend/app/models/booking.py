from sqlalchemy import Column, String, ForeignKey, Text, Date, DateTime, Float, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from .base import BaseModel, IdType


class Booking(BaseModel):
    __tablename__ = "booking"
    
    status = Column(String(20), nullable=False, default="pending")  # pending, confirmed, completed, cancelled
    travelers = Column(JSON, nullable=False)
    total_amount = Column(Float, nullable=False)
    paid_amount = Column(Float, nullable=False, default=0)
    currency = Column(String(3), nullable=False, default="USD")
    booking_date = Column(DateTime(timezone=True), server_default=func.now())
    travel_date = Column(Date, nullable=False)
    special_requests = Column(Text)
    payment_history = Column(JSON, default=list)
    
    # Foreign keys
    user_id = Column(IdType, ForeignKey("user.id", ondelete="SET NULL"))
    package_id = Column(IdType, ForeignKey("tour_package.id", ondelete="SET NULL"), index=True)
    
    # Relationships
    user = relationship("User", back_populates="bookings")
    package = relationship("TourPackage", back_populates="bookings")


BOOKING_STATUSES = ("pending", "confirmed", "completed", "cancelled")
PAYMENT_METHODS = ("credit-card", "bank-transfer", "paypal", "cash")
PAYMENT_STATUSES = ("pending", "completed", "failed", "refunded")
