#!/usr/bin/env python3
"""Seed script to populate the database with sample catalog data."""

import logging

from app.api.blog import BlogPostCreate
from app.api.destinations import DestinationCreate
from app.api.packages import PackageCreate
from app.core.database import get_sessionmaker, init_db
from app.core.documents import apply_document
from app.models import BlogPost, Destination, TourPackage

logger = logging.getLogger(__name__)

SAMPLE_DESTINATIONS = [
    {
        "name": "Bali",
        "country": "Indonesia",
        "region": "Asia",
        "description": "Tropical paradise with stunning beaches, ancient temples, and vibrant culture.",
        "images": [
            "https://images.unsplash.com/photo-1544367567-0f2fcb009e0b",
            "https://images.unsplash.com/photo-1518548419970-58e3b4079ab2",
        ],
        "highlights": ["Beautiful beaches", "Ancient temples", "Rice terraces", "Traditional arts"],
        "bestTimeToVisit": "April to October",
        "averageRating": 4.8,
        "reviewCount": 1250,
        "startingPrice": 899,
        "tags": ["beach", "culture", "adventure", "tropical", "temples"],
        "coordinates": {"lat": -8.3405, "lng": 115.092},
        "featured": True,
    },
    {
        "name": "Santorini",
        "country": "Greece",
        "region": "Europe",
        "description": "Iconic Greek island with whitewashed buildings and breathtaking sunsets.",
        "images": ["https://images.unsplash.com/photo-1570077188670-e3a8d69ac5ff"],
        "highlights": ["Stunning sunsets", "White architecture", "Wine tasting", "Volcanic beaches"],
        "bestTimeToVisit": "May to September",
        "averageRating": 4.9,
        "reviewCount": 980,
        "startingPrice": 1299,
        "tags": ["romance", "island", "culture", "photography", "wine"],
        "coordinates": {"lat": 36.3932, "lng": 25.4615},
        "featured": True,
    },
    {
        "name": "Machu Picchu",
        "country": "Peru",
        "region": "South America",
        "description": "Ancient Incan citadel set high in the Andes Mountains.",
        "images": ["https://images.unsplash.com/photo-1587595431973-160d0d94add1"],
        "highlights": ["Ancient ruins", "Mountain views", "Inca Trail", "Sacred Valley"],
        "bestTimeToVisit": "May to September",
        "averageRating": 4.9,
        "reviewCount": 1850,
        "startingPrice": 899,
        "tags": ["adventure", "history", "mountains", "hiking"],
        "coordinates": {"lat": -13.1631, "lng": -72.545},
        "featured": True,
    },
    {
        "name": "Safari Kenya",
        "country": "Kenya",
        "region": "Africa",
        "description": "The ultimate African safari in Kenya's world-famous national parks.",
        "images": ["https://images.unsplash.com/photo-1516426122078-c23e76319801"],
        "highlights": ["Big Five animals", "Great Migration", "Masai culture", "Game drives"],
        "bestTimeToVisit": "July to October, January to March",
        "averageRating": 4.8,
        "reviewCount": 920,
        "startingPrice": 2299,
        "tags": ["safari", "wildlife", "adventure", "nature", "photography"],
        "coordinates": {"lat": -1.2921, "lng": 36.8219},
    },
]

SAMPLE_PACKAGES = [
    {
        "title": "Magical Bali Adventure",
        "destination": "Bali, Indonesia",
        "duration": "7 Days / 6 Nights",
        "price": 1299,
        "originalPrice": 1599,
        "description": "Discover the beaches, temples and culture of Bali on a week-long guided tour.",
        "highlights": ["Tanah Lot Temple", "Ubud rice terraces", "Balinese cooking class", "Sunrise hike at Mount Batur"],
        "inclusions": ["6 nights in 4-star hotels", "Daily breakfast", "Private transportation", "English-speaking guide"],
        "exclusions": ["International flights", "Travel insurance", "Personal expenses"],
        "difficulty": "Easy",
        "groupSize": {"min": 2, "max": 15},
        "departureDate": "2025-03-15",
        "availableDates": ["2025-03-15", "2025-04-01", "2025-04-15"],
        "category": "Cultural",
        "itinerary": [
            {
                "day": 1,
                "title": "Arrival in Denpasar",
                "description": "Airport pickup and hotel check-in",
                "activities": ["Airport transfer", "Hotel check-in", "Welcome dinner"],
                "meals": ["Dinner"],
            },
            {
                "day": 2,
                "title": "Ubud Cultural Tour",
                "description": "Explore the cultural heart of Bali",
                "activities": ["Rice terrace visit", "Temple tour", "Art market"],
                "meals": ["Breakfast", "Lunch"],
                "accommodation": "Ubud Resort",
            },
        ],
        "images": ["https://images.unsplash.com/photo-1537953773345-d172ccf13cf1"],
        "featured": True,
    },
    {
        "title": "Swiss Alps Adventure",
        "destination": "Zurich, Switzerland",
        "duration": "6 Days / 5 Nights",
        "price": 2499,
        "description": "Mountain railways, glacier views and alpine hikes across central Switzerland.",
        "highlights": ["Mount Pilatus cogwheel railway", "Lake Lucerne cruise", "Jungfraujoch"],
        "inclusions": ["5 nights accommodation", "Swiss Travel Pass", "Daily breakfast"],
        "exclusions": ["International flights", "Lunches"],
        "difficulty": "Moderate",
        "groupSize": {"min": 4, "max": 12},
        "departureDate": "2025-06-10",
        "availableDates": ["2025-06-10", "2025-07-08"],
        "category": "Adventure",
        "itinerary": [
            {
                "day": 1,
                "title": "Arrival in Zurich",
                "description": "Transfer to Lucerne and evening lake walk",
                "activities": ["Airport transfer", "Old town walk"],
                "meals": ["Dinner"],
                "accommodation": "Hotel Schweizerhof Luzern",
            },
        ],
        "images": ["https://images.unsplash.com/photo-1531366936337-7c912a4589a7"],
        "featured": True,
    },
    {
        "title": "Safari Adventure Kenya",
        "destination": "Masai Mara, Kenya",
        "duration": "8 Days / 7 Nights",
        "price": 3199,
        "originalPrice": 3499,
        "description": "Game drives in the Masai Mara during the Great Migration season.",
        "highlights": ["Big Five game drives", "Masai village visit", "Hot air balloon safari"],
        "inclusions": ["Full board in safari lodges", "Park fees", "4x4 safari vehicle"],
        "exclusions": ["Visa fees", "Tips"],
        "difficulty": "Challenging",
        "groupSize": {"min": 2, "max": 6},
        "departureDate": "2025-08-01",
        "availableDates": ["2025-08-01", "2025-09-01"],
        "category": "Wildlife",
        "itinerary": [
            {
                "day": 1,
                "title": "Arrival in Nairobi",
                "description": "Welcome briefing and overnight in Nairobi",
                "activities": ["Airport transfer", "Safari briefing"],
                "meals": ["Dinner"],
            },
        ],
        "images": ["https://images.unsplash.com/photo-1547036967-23d11aacaee0"],
    },
]

SAMPLE_POSTS = [
    {
        "title": "Top 10 Hidden Gems in Southeast Asia",
        "slug": "hidden-gems-southeast-asia",
        "excerpt": "Discover the most beautiful and lesser-known destinations in Southeast Asia.",
        "content": "From quiet islands in the Philippines to mountain villages in northern Vietnam...",
        "author": {
            "name": "Sarah Johnson",
            "avatar": "/images/authors/sarah.jpg",
            "bio": "Travel writer and photographer with 10+ years of experience.",
        },
        "publishedAt": "2025-01-15T09:00:00Z",
        "readTime": 8,
        "category": "Destinations",
        "tags": ["Southeast Asia", "Hidden Gems", "Travel Tips"],
        "featuredImage": "/images/blog/hidden-gems.jpg",
        "images": ["/images/blog/hidden-gems-1.jpg"],
        "seo": {
            "metaTitle": "Top 10 Hidden Gems in Southeast Asia",
            "metaDescription": "Explore the most beautiful hidden destinations in Southeast Asia.",
            "keywords": ["southeast asia", "hidden gems", "travel"],
        },
        "featured": True,
    },
    {
        "title": "Packing Light for a Two-Week Trip",
        "excerpt": "Everything you need fits in one carry-on. Here is how.",
        "content": "Start with a capsule wardrobe of neutral colours...",
        "author": {
            "name": "Daniel Okafor",
            "avatar": "/images/authors/daniel.jpg",
            "bio": "Budget traveller who has visited 60 countries with one backpack.",
        },
        "publishedAt": "2025-02-02T09:00:00Z",
        "readTime": 5,
        "category": "Travel Tips",
        "tags": ["packing", "carry-on"],
        "featuredImage": "/images/blog/packing-light.jpg",
        "seo": {
            "metaTitle": "Packing Light for a Two-Week Trip",
            "metaDescription": "A carry-on only packing list for two weeks of travel.",
            "keywords": ["packing", "carry-on", "travel tips"],
        },
    },
]


def create_sample_data():
    """Create sample destinations, tour packages and blog posts."""
    init_db()
    db = get_sessionmaker()()

    try:
        for data in SAMPLE_DESTINATIONS:
            db.add(apply_document(Destination(), DestinationCreate.model_validate(data)))

        for data in SAMPLE_PACKAGES:
            db.add(apply_document(TourPackage(rating=0, review_count=0), PackageCreate.model_validate(data)))

        for data in SAMPLE_POSTS:
            db.add(apply_document(BlogPost(view_count=0, likes_count=0), BlogPostCreate.model_validate(data)))

        db.commit()
        logger.info(
            "Sample data created: %d destinations, %d packages, %d blog posts",
            len(SAMPLE_DESTINATIONS), len(SAMPLE_PACKAGES), len(SAMPLE_POSTS)
        )
    except Exception:
        logger.error("Error creating sample data", exc_info=True)
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    create_sample_data()
