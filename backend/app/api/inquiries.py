import logging
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Request, status
from pydantic import EmailStr, Field, field_validator
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.documents import apply_document
from app.core.query import CatalogQuery, EnumFilter
from app.core.responses import (
    APIError,
    CamelModel,
    DocumentResponse,
    parse_document_id,
    serialize,
    success_response,
)
from app.models import Destination, TourPackage
from app.models.inquiry import Inquiry, INQUIRY_PRIORITIES, INQUIRY_STATUSES

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/inquiries", tags=["inquiries"])


class InquiryCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: str = Field(..., min_length=1, max_length=50)
    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=5000)
    package_interest: Optional[int] = None
    destination_interest: Optional[int] = None

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, email: str) -> str:
        return email.lower()


class InquiryUpdate(CamelModel):
    status: Optional[Literal[INQUIRY_STATUSES]] = None
    priority: Optional[Literal[INQUIRY_PRIORITIES]] = None
    response: Optional[str] = Field(None, max_length=5000)


class InquiryResponse(DocumentResponse):
    name: str
    email: str
    phone: str
    subject: str
    message: str
    package_interest: Optional[int] = None
    destination_interest: Optional[int] = None
    status: str
    priority: str
    response: Optional[str] = None


inquiry_catalog = CatalogQuery(
    Inquiry,
    search_columns=[Inquiry.name, Inquiry.email, Inquiry.subject, Inquiry.message],
    enum_filters={
        "status": EnumFilter(Inquiry.status, INQUIRY_STATUSES),
        "priority": EnumFilter(Inquiry.priority, INQUIRY_PRIORITIES),
    },
    sort_fields={
        "createdAt": Inquiry.created_at,
        "status": Inquiry.status,
        "priority": Inquiry.priority,
    },
    default_sort="createdAt",
    default_order="desc",
)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_inquiry(inquiry_data: InquiryCreate, db: Session = Depends(get_db)):
    """Record a message sent through the contact form."""
    if inquiry_data.package_interest is not None and db.get(TourPackage, inquiry_data.package_interest) is None:
        raise APIError(status.HTTP_404_NOT_FOUND, "Tour package not found")
    if inquiry_data.destination_interest is not None and db.get(Destination, inquiry_data.destination_interest) is None:
        raise APIError(status.HTTP_404_NOT_FOUND, "Destination not found")

    inquiry = apply_document(Inquiry(status="new", priority="medium"), inquiry_data)

    db.add(inquiry)
    db.commit()
    db.refresh(inquiry)

    logger.info(f"New inquiry {inquiry.id}: {inquiry.subject}")
    return success_response(
        serialize(InquiryResponse, inquiry),
        message="Thank you! We will get back to you shortly.",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("")
async def get_inquiries(request: Request, db: Session = Depends(get_db)):
    params = inquiry_catalog.parse(request.query_params)
    inquiries, pagination = inquiry_catalog.execute(db, params)

    return success_response(
        [serialize(InquiryResponse, inquiry) for inquiry in inquiries],
        pagination=pagination,
    )


@router.patch("/{inquiry_id}")
async def update_inquiry(
    inquiry_id: str,
    inquiry_data: InquiryUpdate,
    db: Session = Depends(get_db)
):
    """Triage an inquiry: status, priority and the reply sent."""
    inquiry = db.get(Inquiry, parse_document_id(inquiry_id, "inquiry"))
    if inquiry is None:
        raise APIError(status.HTTP_404_NOT_FOUND, "Inquiry not found")

    for field, value in inquiry_data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(inquiry, field, value)

    db.commit()
    db.refresh(inquiry)

    return success_response(
        serialize(InquiryResponse, inquiry),
        message="Inquiry updated successfully",
    )
