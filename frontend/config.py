import os
from dotenv import load_dotenv

load_dotenv()

# Backend API configuration
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000/api")
REQUEST_TIMEOUT = float(os.getenv("API_TIMEOUT", "10"))

# Streamlit configuration
SITE_NAME = "Wanderlust Travel"
PAGE_TITLE = "Wanderlust Travel - Discover Your Next Adventure"
PAGE_ICON = "✈️"
LAYOUT = "wide"

# Catalog pages
PAGE_SIZE = 9
ADMIN_PAGE_SIZE = 50

# Colors and styling
PRIMARY_COLOR = "#1976d2"
SECONDARY_COLOR = "#ff7f0e"
SUCCESS_COLOR = "#2ca02c"
ERROR_COLOR = "#d62728"
WARNING_COLOR = "#ff9800"
