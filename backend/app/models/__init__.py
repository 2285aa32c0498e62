from .base import BaseModel
from .tour_package import TourPackage
from .destination import Destination
from .blog_post import BlogPost
from .user import User
from .booking import Booking
from .review import Review
from .inquiry import Inquiry

__all__ = [
    "BaseModel",
    "TourPackage",
    "Destination",
    "BlogPost",
    "User",
    "Booking",
    "Review",
    "Inquiry",
]
