import logging
from datetime import date, datetime, timezone
from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, status
from pydantic import EmailStr, Field
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.documents import apply_document
from app.core.responses import (
    APIError,
    CamelModel,
    DocumentResponse,
    parse_document_id,
    serialize,
    success_response,
)
from app.models import Booking, TourPackage, User
from app.models.booking import BOOKING_STATUSES, PAYMENT_METHODS, PAYMENT_STATUSES
from app.models.tour_package import CURRENCIES

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])

# pending -> confirmed -> completed, and anything not finished can be cancelled
ALLOWED_TRANSITIONS = {
    "pending": {"confirmed", "cancelled"},
    "confirmed": {"completed", "cancelled"},
    "completed": set(),
    "cancelled": set(),
}


class Traveler(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    date_of_birth: date
    passport_number: Optional[str] = None
    nationality: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=50)


class BookingCreate(CamelModel):
    package_id: int
    user_id: Optional[int] = None
    travelers: List[Traveler] = Field(..., min_length=1)
    travel_date: date
    total_amount: Optional[float] = Field(None, ge=0)
    currency: Literal[CURRENCIES] = "USD"
    special_requests: Optional[str] = Field(None, max_length=1000)


class BookingStatusUpdate(CamelModel):
    status: Literal[BOOKING_STATUSES]


class PaymentRecord(CamelModel):
    amount: float = Field(..., gt=0)
    currency: Literal[CURRENCIES] = "USD"
    method: Literal[PAYMENT_METHODS]
    status: Literal[PAYMENT_STATUSES] = "completed"
    transaction_id: str = Field(..., min_length=1, max_length=100)
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class BookingResponse(DocumentResponse):
    package_id: Optional[int] = None
    user_id: Optional[int] = None
    status: str
    travelers: List[Traveler]
    total_amount: float
    paid_amount: float
    currency: str
    booking_date: Optional[datetime] = None
    travel_date: date
    special_requests: Optional[str] = None
    payment_history: List[PaymentRecord] = []


def get_booking_or_404(db: Session, booking_id: str) -> Booking:
    booking = db.get(Booking, parse_document_id(booking_id, "booking"))
    if booking is None:
        raise APIError(status.HTTP_404_NOT_FOUND, "Booking not found")
    return booking


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_booking(booking_data: BookingCreate, db: Session = Depends(get_db)):
    """Book a tour package for one or more travelers."""
    package = db.get(TourPackage, booking_data.package_id)
    if package is None:
        raise APIError(status.HTTP_404_NOT_FOUND, "Tour package not found")
    if booking_data.user_id is not None and db.get(User, booking_data.user_id) is None:
        raise APIError(status.HTTP_404_NOT_FOUND, "User not found")

    group_max = (package.group_size or {}).get("max")
    if group_max and len(booking_data.travelers) > group_max:
        raise APIError(
            status.HTTP_400_BAD_REQUEST,
            f"This package accepts at most {group_max} travelers per booking",
        )

    booking = apply_document(Booking(status="pending", paid_amount=0, payment_history=[]), booking_data)
    if booking.total_amount is None:
        booking.total_amount = package.price * len(booking_data.travelers)

    db.add(booking)
    db.commit()
    db.refresh(booking)

    logger.info(f"Created booking {booking.id} for package {package.id}")
    return success_response(
        serialize(BookingResponse, booking),
        message="Booking created successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("/{booking_id}")
async def get_booking(booking_id: str, db: Session = Depends(get_db)):
    """Get a booking by ID."""
    booking = get_booking_or_404(db, booking_id)
    return success_response(serialize(BookingResponse, booking))


@router.patch("/{booking_id}/status")
async def update_booking_status(
    booking_id: str,
    status_data: BookingStatusUpdate,
    db: Session = Depends(get_db)
):
    """Move a booking along its lifecycle."""
    booking = get_booking_or_404(db, booking_id)

    if status_data.status not in ALLOWED_TRANSITIONS[booking.status]:
        raise APIError(
            status.HTTP_400_BAD_REQUEST,
            f"Cannot change booking status from {booking.status} to {status_data.status}",
        )

    booking.status = status_data.status
    db.commit()
    db.refresh(booking)

    logger.info(f"Booking {booking.id} is now {booking.status}")
    return success_response(
        serialize(BookingResponse, booking),
        message="Booking status updated successfully",
    )


@router.post("/{booking_id}/payments", status_code=status.HTTP_201_CREATED)
async def record_payment(
    booking_id: str,
    payment: PaymentRecord,
    db: Session = Depends(get_db)
):
    """Append a payment to the booking history; completed payments count towards the paid amount."""
    booking = get_booking_or_404(db, booking_id)
    if booking.status == "cancelled":
        raise APIError(status.HTTP_400_BAD_REQUEST, "Cannot record a payment on a cancelled booking")

    # reassign so the JSON column is flagged as changed
    booking.payment_history = [*(booking.payment_history or []), payment.model_dump(by_alias=True, mode="json")]
    if payment.status == "completed":
        booking.paid_amount = (booking.paid_amount or 0) + payment.amount

    db.commit()
    db.refresh(booking)

    logger.info(f"Recorded {payment.status} payment of {payment.amount} {payment.currency} on booking {booking.id}")
    return success_response(
        serialize(BookingResponse, booking),
        message="Payment recorded successfully",
        status_code=status.HTTP_201_CREATED,
    )
