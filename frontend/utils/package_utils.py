from typing import Any, Dict, List, Optional

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "AUD": "A$",
    "CAD": "CA$",
}

DIFFICULTY_COLORS = {
    "Easy": "green",
    "Moderate": "orange",
    "Challenging": "red",
}


def get_discount_percentage(original_price: Optional[float], current_price: Optional[float]) -> int:
    """Whole-number percentage saved against the original price, or 0."""
    if not original_price or not current_price or original_price <= current_price:
        return 0
    return round((original_price - current_price) / original_price * 100)


def format_price(price: float, currency: str = "USD") -> str:
    symbol = CURRENCY_SYMBOLS.get(currency)
    # Yen has no minor unit
    amount = f"{price:,.0f}" if currency == "JPY" else f"{price:,.2f}"
    if symbol is None:
        return f"{amount} {currency}"
    return f"{symbol}{amount}"


def get_difficulty_color(difficulty: str) -> str:
    """Streamlit markdown color for a difficulty badge."""
    return DIFFICULTY_COLORS.get(difficulty, "gray")


def validate_package_data(package_data: Dict[str, Any]) -> List[str]:
    """Check a package form before submitting it; returns the problems found."""
    errors = []

    if not (package_data.get("title") or "").strip():
        errors.append("Title is required")

    if not (package_data.get("destination") or "").strip():
        errors.append("Destination is required")

    price = package_data.get("price")
    if not price or price <= 0:
        errors.append("Price must be greater than 0")

    if not (package_data.get("description") or "").strip():
        errors.append("Description is required")

    if not package_data.get("highlights"):
        errors.append("At least one highlight is required")

    if not package_data.get("inclusions"):
        errors.append("At least one inclusion is required")

    if not package_data.get("itinerary"):
        errors.append("At least one itinerary day is required")

    group_size = package_data.get("groupSize") or {}
    if group_size.get("min") and group_size.get("max") and group_size["min"] > group_size["max"]:
        errors.append("Minimum group size cannot be greater than maximum group size")

    return errors
