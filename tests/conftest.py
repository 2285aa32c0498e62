import os

# Settings are read at import time, so point the app at in-memory SQLite first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"

import copy

import pytest
from fastapi.testclient import TestClient

from app.core.database import get_sessionmaker
from app.main import app

PACKAGE = {
    "title": "Magical Bali Adventure",
    "destination": "Bali, Indonesia",
    "duration": "7 Days / 6 Nights",
    "price": 1299,
    "originalPrice": 1599,
    "description": "Temples, rice terraces and beaches on a guided week in Bali.",
    "highlights": ["Tanah Lot Temple", "Ubud rice terraces"],
    "inclusions": ["6 nights accommodation", "Daily breakfast"],
    "exclusions": ["International flights"],
    "difficulty": "Easy",
    "groupSize": {"min": 2, "max": 15},
    "departureDate": "2025-03-15",
    "availableDates": ["2025-03-15", "2025-04-01"],
    "category": "Cultural",
    "itinerary": [
        {
            "day": 1,
            "title": "Arrival in Denpasar",
            "description": "Airport pickup and hotel check-in",
            "activities": ["Airport transfer", "Welcome dinner"],
            "meals": ["Dinner"],
        }
    ],
    "images": ["https://images.unsplash.com/photo-1537953773345-d172ccf13cf1"],
    "featured": True,
}

DESTINATION = {
    "name": "Santorini",
    "country": "Greece",
    "region": "Europe",
    "description": "Iconic Greek island with whitewashed buildings and sunsets.",
    "images": ["https://images.unsplash.com/photo-1570077188670-e3a8d69ac5ff"],
    "highlights": ["Stunning sunsets", "Wine tasting"],
    "bestTimeToVisit": "May to September",
    "averageRating": 4.9,
    "reviewCount": 980,
    "startingPrice": 1299,
    "tags": ["Romance", "island"],
    "coordinates": {"lat": 36.3932, "lng": 25.4615},
    "featured": True,
}

BLOG_POST = {
    "title": "Top 10 Hidden Gems in Southeast Asia",
    "excerpt": "Lesser-known places worth the detour.",
    "content": "From quiet islands to mountain villages...",
    "author": {
        "name": "Sarah Johnson",
        "avatar": "/images/authors/sarah.jpg",
        "bio": "Travel writer and photographer.",
    },
    "readTime": 8,
    "category": "Destinations",
    "tags": ["Asia", "hidden gems"],
    "featuredImage": "/images/blog/hidden-gems.jpg",
    "seo": {
        "metaTitle": "Hidden Gems in Southeast Asia",
        "metaDescription": "The best hidden destinations in Southeast Asia.",
        "keywords": ["asia", "travel"],
    },
}


def build(template, **overrides):
    """Copy of a request body template with some fields replaced."""
    body = copy.deepcopy(template)
    body.update(overrides)
    return body


@pytest.fixture
def client():
    # entering the client runs the lifespan: tables are created on startup
    # and the in-memory database is discarded on shutdown
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(client):
    session = get_sessionmaker()()
    yield session
    session.close()


@pytest.fixture
def create_package(client):
    def _create(**overrides):
        response = client.post("/api/packages", json=build(PACKAGE, **overrides))
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _create


@pytest.fixture
def create_destination(client):
    def _create(**overrides):
        response = client.post("/api/destinations", json=build(DESTINATION, **overrides))
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _create


@pytest.fixture
def create_post(client):
    def _create(**overrides):
        response = client.post("/api/blog", json=build(BLOG_POST, **overrides))
        assert response.status_code == 201, response.text
        return response.json()["data"]
    return _create
