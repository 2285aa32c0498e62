import logging
from typing import Any, Dict, List, Literal

from fastapi import APIRouter, Depends, Body, Request, status
from pydantic import Field, field_validator
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.documents import apply_document, merge_update
from app.core.query import CatalogQuery, EnumFilter
from app.core.responses import (
    APIError,
    CamelModel,
    DocumentResponse,
    parse_document_id,
    serialize,
    success_response,
)
from app.models.destination import Destination, REGIONS
from app.models.tour_package import CURRENCIES

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/destinations", tags=["destinations"])


class Coordinates(CamelModel):
    lat: float = Field(..., ge=-90, le=90, description="Latitude")
    lng: float = Field(..., ge=-180, le=180, description="Longitude")


class DestinationCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100, description="Destination name")
    country: str = Field(..., min_length=1, max_length=50, description="Country")
    region: Literal[REGIONS]
    description: str = Field(..., min_length=1, max_length=1000, description="Description")
    images: List[str] = Field(..., min_length=1, description="At least one image")
    highlights: List[str] = Field(..., min_length=1, description="At least one highlight")
    best_time_to_visit: str = Field(..., min_length=1)
    average_rating: float = Field(0, ge=0, le=5)
    review_count: int = Field(0, ge=0)
    starting_price: float = Field(..., ge=0)
    currency: Literal[CURRENCIES] = "USD"
    tags: List[str] = Field(..., min_length=1, description="At least one tag")
    coordinates: Coordinates
    featured: bool = False
    is_active: bool = True

    @field_validator("highlights")
    @classmethod
    def strip_highlights(cls, highlights: List[str]) -> List[str]:
        return [highlight.strip() for highlight in highlights]

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, tags: List[str]) -> List[str]:
        return [tag.strip().lower() for tag in tags]


class DestinationResponse(DocumentResponse):
    name: str
    country: str
    region: str
    description: str
    images: List[str] = []
    highlights: List[str] = []
    best_time_to_visit: str
    average_rating: float
    review_count: int
    starting_price: float
    currency: str
    tags: List[str] = []
    coordinates: Coordinates
    featured: bool
    is_active: bool


destination_catalog = CatalogQuery(
    Destination,
    search_columns=[Destination.name, Destination.country, Destination.description, Destination.tags],
    enum_filters={"region": EnumFilter(Destination.region, REGIONS)},
    price_column=Destination.starting_price,
    tags_column=Destination.tags,
    featured_column=Destination.featured,
    sort_fields={
        "name": Destination.name,
        "price": Destination.starting_price,
        "rating": Destination.average_rating,
        "reviews": Destination.review_count,
    },
    default_sort="name",
    default_order="asc",
    base_filters=[Destination.is_active.is_(True)],
)


def get_destination_or_404(db: Session, destination_id: str) -> Destination:
    destination = db.get(Destination, parse_document_id(destination_id, "destination"))
    if not destination:
        raise APIError(status.HTTP_404_NOT_FOUND, "Destination not found")
    return destination


@router.get("")
async def get_destinations(request: Request, db: Session = Depends(get_db)):
    """Get active destinations with filtering, search and pagination."""
    params = destination_catalog.parse(request.query_params)
    destinations, pagination = destination_catalog.execute(db, params)

    return success_response(
        [serialize(DestinationResponse, destination) for destination in destinations],
        pagination=pagination,
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_destination(
    destination_data: DestinationCreate,
    db: Session = Depends(get_db)
):
    """Create a new destination."""
    destination = apply_document(Destination(), destination_data)

    db.add(destination)
    db.commit()
    db.refresh(destination)

    logger.info(f"Created destination {destination.id} ({destination.name})")
    return success_response(
        serialize(DestinationResponse, destination),
        message="Destination created successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("/{destination_id}")
async def get_destination(destination_id: str, db: Session = Depends(get_db)):
    """Get a specific destination by ID."""
    destination = get_destination_or_404(db, destination_id)
    return success_response(serialize(DestinationResponse, destination))


@router.put("/{destination_id}")
async def update_destination(
    destination_id: str,
    destination_data: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db)
):
    """Update a destination."""
    destination = get_destination_or_404(db, destination_id)

    validated = merge_update(DestinationCreate, destination, destination_data)
    apply_document(destination, validated)

    db.commit()
    db.refresh(destination)

    logger.info(f"Updated destination {destination.id}")
    return success_response(
        serialize(DestinationResponse, destination),
        message="Destination updated successfully",
    )


@router.delete("/{destination_id}")
async def delete_destination(destination_id: str, db: Session = Depends(get_db)):
    """Delete a destination permanently."""
    destination = get_destination_or_404(db, destination_id)

    db.delete(destination)
    db.commit()

    logger.info(f"Deleted destination {destination_id}")
    return success_response(message="Destination deleted successfully")
