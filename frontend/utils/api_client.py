import logging
from typing import Dict, Any, Optional, List

import requests

from config import API_BASE_URL, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _query_params(filters: Dict[str, Any]) -> Dict[str, str]:
    """Drop unset filters and render the rest the way the API parses them."""
    params = {}
    for key, value in filters.items():
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            if not value:
                continue
            value = ",".join(str(item) for item in value)
        params[_camel(key)] = str(value)
    return params


class APIClient:
    """Client for communicating with the backend API."""

    def __init__(self, base_url: Optional[str] = None, session=None):
        self.base_url = API_BASE_URL if base_url is None else base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()

        # Set default headers
        self.session.headers.update({
            "Content-Type": "application/json"
        })

    # Tour packages

    def get_packages(self, **filters) -> Dict[str, Any]:
        """Get a page of tour packages matching the given filters."""
        return self._request("GET", "/packages", params=_query_params(filters))

    def get_featured_packages(self) -> Dict[str, Any]:
        return self.get_packages(featured=True, limit=6)

    def get_packages_by_category(self, category: str, limit: Optional[int] = None) -> Dict[str, Any]:
        return self.get_packages(category=category, limit=limit)

    def search_packages(self, term: str, **filters) -> Dict[str, Any]:
        filters["search"] = term
        return self.get_packages(**filters)

    def get_package(self, package_id: str) -> Dict[str, Any]:
        """Get a specific tour package by ID."""
        return self._request("GET", f"/packages/{package_id}", resource="package", by_id=True)

    def create_package(self, package_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/packages", json=package_data)

    def update_package(self, package_id: str, package_data: Dict[str, Any]) -> Dict[str, Any]:
        """Update fields of a tour package; the server re-validates the whole document."""
        return self._request(
            "PUT", f"/packages/{package_id}", json=package_data, resource="package", by_id=True
        )

    def delete_package(self, package_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/packages/{package_id}", resource="package", by_id=True)

    def get_package_stats(self) -> Dict[str, Any]:
        """Totals for the admin dashboard."""
        return self._request("GET", "/packages/stats")

    def get_package_reviews(self, package_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/packages/{package_id}/reviews", resource="package", by_id=True)

    def add_package_review(self, package_id: str, review_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request(
            "POST", f"/packages/{package_id}/reviews", json=review_data, resource="package", by_id=True
        )

    # Destinations

    def get_destinations(
        self,
        search: Optional[str] = None,
        region: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        featured: Optional[bool] = None,
        tags: Optional[List[str]] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Get list of destinations."""
        params = _query_params({
            "search": search,
            "region": region,
            "minPrice": min_price,
            "maxPrice": max_price,
            "featured": featured,
            "tags": tags,
            "sortBy": sort_by,
            "sortOrder": sort_order,
            "page": page,
            "limit": limit,
        })
        return self._request("GET", "/destinations", params=params)

    def get_destination(self, destination_id: str) -> Dict[str, Any]:
        """Get a specific destination by ID."""
        return self._request(
            "GET", f"/destinations/{destination_id}", resource="destination", by_id=True
        )

    def create_destination(self, destination_data: Dict[str, Any]) -> Dict[str, Any]:
        """Create a new destination."""
        return self._request("POST", "/destinations", json=destination_data)

    def update_destination(self, destination_id: str, destination_data: Dict[str, Any]) -> Dict[str, Any]:
        """Update a destination."""
        return self._request(
            "PUT", f"/destinations/{destination_id}", json=destination_data,
            resource="destination", by_id=True
        )

    def delete_destination(self, destination_id: str) -> Dict[str, Any]:
        """Delete a destination."""
        return self._request(
            "DELETE", f"/destinations/{destination_id}", resource="destination", by_id=True
        )

    # Blog

    def get_blog_posts(self, **filters) -> Dict[str, Any]:
        return self._request("GET", "/blog", params=_query_params(filters))

    def get_blog_post(self, slug: str) -> Dict[str, Any]:
        """Get a published blog post by slug; each read counts as a view."""
        return self._request("GET", f"/blog/{slug}", resource="blog post")

    def create_blog_post(self, post_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/blog", json=post_data)

    def update_blog_post(self, slug: str, post_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/blog/{slug}", json=post_data, resource="blog post")

    def delete_blog_post(self, slug: str) -> Dict[str, Any]:
        """Unpublish a blog post."""
        return self._request("DELETE", f"/blog/{slug}", resource="blog post")

    def like_blog_post(self, slug: str) -> Dict[str, Any]:
        return self._request("PATCH", f"/blog/{slug}/like", resource="blog post")

    # Bookings and inquiries

    def create_booking(self, booking_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/bookings", json=booking_data)

    def get_booking(self, booking_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/bookings/{booking_id}", resource="booking", by_id=True)

    def add_booking_payment(self, booking_id: str, payment: Dict[str, Any]) -> Dict[str, Any]:
        return self._request(
            "POST", f"/bookings/{booking_id}/payments", resource="booking", by_id=True, json=payment
        )

    def create_inquiry(self, inquiry_data: Dict[str, Any]) -> Dict[str, Any]:
        """Send a contact form message."""
        return self._request("POST", "/inquiries", json=inquiry_data)

    def get_inquiries(self, **filters) -> Dict[str, Any]:
        return self._request("GET", "/inquiries", params=_query_params(filters))

    def update_inquiry(self, inquiry_id: str, inquiry_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request(
            "PATCH", f"/inquiries/{inquiry_id}", json=inquiry_data, resource="inquiry", by_id=True
        )

    def get_health(self) -> Dict[str, Any]:
        """Get API health status."""
        return self._request("GET", "/health")

    def _request(
        self,
        method: str,
        path: str,
        resource: Optional[str] = None,
        by_id: bool = False,
        **kwargs
    ) -> Dict[str, Any]:
        try:
            response = self.session.request(
                method, f"{self.base_url}{path}", timeout=REQUEST_TIMEOUT, **kwargs
            )
        except requests.RequestException as exc:
            logger.error(f"{method} {path} failed: {exc}")
            return {"success": False, "error": f"Could not reach the API: {exc}", "status_code": None}

        return self._handle_response(response, resource=resource, by_id=by_id)

    def _handle_response(
        self,
        response,
        resource: Optional[str] = None,
        by_id: bool = False
    ) -> Dict[str, Any]:
        """Return the API envelope, or a normalised error envelope."""
        try:
            data = response.json()
        except ValueError:
            data = None

        if response.status_code < 400 and isinstance(data, dict):
            return data

        if not isinstance(data, dict):
            data = {}

        details = data.get("details")
        if response.status_code == 404 and resource:
            error_msg = f"{resource.capitalize()} not found"
        elif response.status_code == 400 and by_id and not details:
            error_msg = f"Invalid {resource} ID"
        elif response.status_code < 400:
            error_msg = "Invalid JSON response"
        else:
            error_msg = data.get("error", f"HTTP {response.status_code}")

        result = {"success": False, "error": error_msg, "status_code": response.status_code}
        if details:
            result["details"] = details
        return result


# Global API client instance
api_client = APIClient()
