from sqlalchemy import Column, String, ForeignKey, Text
from .base import BaseModel, IdType


class Inquiry(BaseModel):
    __tablename__ = "inquiry"
    
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    subject = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default="new", index=True)  # new, in-progress, resolved, closed
    priority = Column(String(10), nullable=False, default="medium")  # low, medium, high
    response = Column(Text)
    
    # Foreign keys
    package_interest = Column(IdType, ForeignKey("tour_package.id", ondelete="SET NULL"))
    destination_interest = Column(IdType, ForeignKey("destination.id", ondelete="SET NULL"))


INQUIRY_STATUSES = ("new", "in-progress", "resolved", "closed")
INQUIRY_PRIORITIES = ("low", "medium", "high")
