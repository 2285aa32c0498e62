import logging
from typing import Annotated, Any, Dict, List, Literal, Optional

from fastapi import APIRouter, Body, Depends, Request, status
from pydantic import Field, StringConstraints, model_validator
from sqlalchemy import func
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
from app.models import Review, TourPackage, User
from app.models.tour_package import CURRENCIES, DIFFICULTIES, MEALS, PACKAGE_CATEGORIES

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/packages", tags=["packages"])

ImageUrl = Annotated[str, StringConstraints(pattern=r"^https?://.+")]
ListItem = Annotated[str, StringConstraints(strip_whitespace=True, max_length=200)]
Activity = Annotated[str, StringConstraints(strip_whitespace=True, max_length=100)]


class GroupSize(CamelModel):
    min: int = Field(..., ge=1, description="Minimum group size")
    max: int = Field(..., ge=1, description="Maximum group size")

    @model_validator(mode="after")
    def check_bounds(self):
        if self.min > self.max:
            raise ValueError("Minimum group size cannot be greater than maximum group size")
        return self


class ItineraryDay(CamelModel):
    day: int = Field(..., ge=1)
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=1000)
    activities: List[Activity] = Field(default_factory=list)
    meals: List[Literal[MEALS]] = Field(default_factory=list)
    accommodation: Optional[str] = Field(None, max_length=200)


class PackageCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200, description="Package title")
    destination: str = Field(..., min_length=1, max_length=100, description="Destination name")
    duration: str = Field(..., min_length=1, description="e.g. 7 Days / 6 Nights")
    price: float = Field(..., ge=0)
    original_price: Optional[float] = Field(None, ge=0)
    currency: Literal[CURRENCIES] = "USD"
    description: str = Field(..., min_length=1, max_length=2000)
    highlights: List[ListItem] = Field(default_factory=list)
    inclusions: List[ListItem] = Field(default_factory=list)
    exclusions: List[ListItem] = Field(default_factory=list)
    difficulty: Literal[DIFFICULTIES]
    group_size: GroupSize
    departure_date: str = Field(..., min_length=1)
    available_dates: List[str] = Field(default_factory=list)
    category: Literal[PACKAGE_CATEGORIES]
    itinerary: List[ItineraryDay] = Field(default_factory=list)
    images: List[ImageUrl] = Field(default_factory=list)
    featured: bool = False


class PackageResponse(DocumentResponse):
    title: str
    destination: str
    duration: str
    price: float
    original_price: Optional[float] = None
    currency: str
    description: str
    highlights: List[str] = []
    inclusions: List[str] = []
    exclusions: List[str] = []
    difficulty: str
    group_size: GroupSize
    departure_date: str
    available_dates: List[str] = []
    category: str
    itinerary: List[ItineraryDay] = []
    images: List[str] = []
    featured: bool
    rating: float
    review_count: int
    discount_percentage: int


class ReviewCreate(CamelModel):
    rating: int = Field(..., ge=1, le=5)
    title: str = Field(..., min_length=1, max_length=100)
    comment: str = Field(..., min_length=1, max_length=1000)
    images: List[str] = Field(default_factory=list)
    user_id: Optional[int] = None


class ReviewResponse(DocumentResponse):
    rating: int
    title: str
    comment: str
    images: List[str] = []
    helpful: int
    verified: bool
    package_id: Optional[int] = None


package_catalog = CatalogQuery(
    TourPackage,
    search_columns=[TourPackage.title, TourPackage.destination, TourPackage.description, TourPackage.highlights],
    enum_filters={
        "category": EnumFilter(TourPackage.category, PACKAGE_CATEGORIES),
        "difficulty": EnumFilter(TourPackage.difficulty, DIFFICULTIES),
    },
    price_column=TourPackage.price,
    featured_column=TourPackage.featured,
    sort_fields={
        "price": TourPackage.price,
        "rating": TourPackage.rating,
        "reviewCount": TourPackage.review_count,
        "title": TourPackage.title,
        "createdAt": TourPackage.created_at,
    },
    default_sort="createdAt",
    default_order="desc",
)


def get_package_or_404(db: Session, package_id: str) -> TourPackage:
    package = db.get(TourPackage, parse_document_id(package_id, "package"))
    if package is None:
        raise APIError(status.HTTP_404_NOT_FOUND, "Tour package not found")
    return package


@router.get("")
async def list_packages(request: Request, db: Session = Depends(get_db)):
    """List tour packages with search, filters, sorting and pagination."""
    params = package_catalog.parse(request.query_params)
    packages, pagination = package_catalog.execute(db, params)

    return success_response(
        [serialize(PackageResponse, package) for package in packages],
        pagination=pagination,
    )


@router.get("/stats")
async def get_package_stats(db: Session = Depends(get_db)):
    """Aggregate figures for the admin dashboard."""
    total = db.query(func.count(TourPackage.id)).scalar() or 0
    featured = db.query(func.count(TourPackage.id)).filter(TourPackage.featured.is_(True)).scalar() or 0
    categories = dict(
        db.query(TourPackage.category, func.count(TourPackage.id))
        .group_by(TourPackage.category)
        .all()
    )
    average_price = db.query(func.avg(TourPackage.price)).scalar() or 0

    return success_response({
        "total": total,
        "featured": featured,
        "categories": categories,
        "averagePrice": round(float(average_price), 2),
    })


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_package(package_data: PackageCreate, db: Session = Depends(get_db)):
    """Create a new tour package."""
    package = apply_document(TourPackage(rating=0, review_count=0), package_data)

    db.add(package)
    db.commit()
    db.refresh(package)

    logger.info(f"Created tour package {package.id} ({package.title})")
    return success_response(
        serialize(PackageResponse, package),
        message="Package created successfully",
        status_code=status.HTTP_201_CREATED,
    )


@router.get("/{package_id}")
async def get_package(package_id: str, db: Session = Depends(get_db)):
    """Get a specific tour package by ID."""
    package = get_package_or_404(db, package_id)
    return success_response(serialize(PackageResponse, package))


@router.put("/{package_id}")
async def update_package(
    package_id: str,
    update_data: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db)
):
    """Update a tour package; the merged document is validated again."""
    package = get_package_or_404(db, package_id)

    # rating and reviewCount are maintained by reviews, not by the client
    validated = merge_update(PackageCreate, package, update_data)
    apply_document(package, validated)

    db.commit()
    db.refresh(package)

    logger.info(f"Updated tour package {package.id}")
    return success_response(
        serialize(PackageResponse, package),
        message="Tour package updated successfully",
    )


@router.delete("/{package_id}")
async def delete_package(package_id: str, db: Session = Depends(get_db)):
    """Delete a tour package permanently."""
    package = get_package_or_404(db, package_id)

    db.delete(package)
    db.commit()

    logger.info(f"Deleted tour package {package_id}")
    return success_response(message="Tour package deleted successfully")


@router.get("/{package_id}/reviews")
async def list_package_reviews(package_id: str, db: Session = Depends(get_db)):
    """Reviews for a package, newest first."""
    package = get_package_or_404(db, package_id)
    reviews = (
        db.query(Review)
        .filter(Review.package_id == package.id)
        .order_by(Review.created_at.desc(), Review.id.desc())
        .all()
    )
    return success_response([serialize(ReviewResponse, review) for review in reviews])


@router.post("/{package_id}/reviews", status_code=status.HTTP_201_CREATED)
async def add_package_review(
    package_id: str,
    review_data: ReviewCreate,
    db: Session = Depends(get_db)
):
    """Add a review and fold its rating into the package's running average."""
    package = get_package_or_404(db, package_id)

    if review_data.user_id is not None and db.get(User, review_data.user_id) is None:
        raise APIError(status.HTTP_404_NOT_FOUND, "User not found")

    review = apply_document(Review(package_id=package.id), review_data)
    db.add(review)

    # single UPDATE so concurrent reviews are not lost
    db.query(TourPackage).filter(TourPackage.id == package.id).update(
        {
            TourPackage.rating: (TourPackage.rating * TourPackage.review_count + review_data.rating)
            / (TourPackage.review_count + 1),
            TourPackage.review_count: TourPackage.review_count + 1,
        },
        synchronize_session=False,
    )
    db.commit()
    db.refresh(review)
    db.refresh(package)

    return success_response(
        {
            "review": serialize(ReviewResponse, review),
            "rating": round(package.rating, 2),
            "reviewCount": package.review_count,
        },
        message="Review added successfully",
        status_code=status.HTTP_201_CREATED,
    )
