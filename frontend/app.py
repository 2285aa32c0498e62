import streamlit as st
from utils.ui import (
    setup_page,
    init_session_state,
    check_api_response,
    render_package_card,
    render_destination_card,
    render_post_card,
    render_stars,
    render_footer,
)
from utils.api_client import api_client
from content import TESTIMONIALS
from config import SITE_NAME

PACKAGES_PAGE = "pages/2_🧳_Packages.py"
BLOG_PAGE = "pages/3_📝_Blog.py"

# Page configuration
setup_page()

# Initialize session state
init_session_state(selected_package_id=None, selected_post_slug=None)

# Custom CSS for better styling
st.markdown("""
<style>
    .main-header {
        text-align: center;
        padding: 2rem 0 0.5rem 0;
        background: linear-gradient(90deg, #1976d2, #ff7f0e);
        -webkit-background-clip: text;
        -webkit-text-fill-color: transparent;
        background-clip: text;
        font-size: 3rem;
        font-weight: bold;
    }

    .hero-subtitle {
        text-align: center;
        font-size: 1.25rem;
        color: #555;
        margin-bottom: 2rem;
    }

    .testimonial-card {
        background: #f8f9fa;
        padding: 1.5rem;
        border-radius: 10px;
        border-left: 4px solid #1976d2;
        margin: 1rem 0;
    }
</style>
""", unsafe_allow_html=True)

# Sidebar
with st.sidebar:
    st.header(f"✈️ {SITE_NAME}")
    st.markdown("Use the menu above to browse destinations, tour packages and travel stories.")

    st.markdown("---")

    # Get API health
    health_response = api_client.get_health()
    if health_response.get("success"):
        health_data = health_response["data"]
        st.success("🟢 API Online")
        st.metric(
            "Database",
            "✅ Connected" if health_data["database"]["connected"] else "❌ Error"
        )
        st.caption(f"API version {health_data['api']['version']}")
    else:
        st.error("🔴 API Offline")

# Hero
st.markdown(f'<h1 class="main-header">✈️ {SITE_NAME}</h1>', unsafe_allow_html=True)
st.markdown(
    '<p class="hero-subtitle">Discover your next adventure with handpicked tours and destinations</p>',
    unsafe_allow_html=True
)

search_term = st.text_input("🔍 Where do you want to go?", placeholder="Search packages, e.g. Bali, safari, Alps...")
if search_term:
    search_response = api_client.search_packages(search_term, limit=6)
    if check_api_response(search_response):
        results = search_response["data"]
        if not results:
            st.info("No packages match your search.")
        cols = st.columns(3)
        for index, package in enumerate(results):
            with cols[index % 3]:
                if render_package_card(package, key_prefix="search"):
                    st.session_state.selected_package_id = package["id"]
                    st.switch_page(PACKAGES_PAGE)

# Featured packages
st.subheader("🌟 Featured Tour Packages")

featured_response = api_client.get_featured_packages()
if check_api_response(featured_response):
    packages = featured_response["data"]
    if not packages:
        st.info("No featured packages yet. Check back soon!")
    cols = st.columns(3)
    for index, package in enumerate(packages):
        with cols[index % 3]:
            if render_package_card(package, key_prefix="featured"):
                st.session_state.selected_package_id = package["id"]
                st.switch_page(PACKAGES_PAGE)

# Featured destinations
st.subheader("🏖️ Popular Destinations")

destinations_response = api_client.get_destinations(featured=True, limit=3, sort_by="rating", sort_order="desc")
if check_api_response(destinations_response):
    cols = st.columns(3)
    for index, destination in enumerate(destinations_response["data"]):
        with cols[index % 3]:
            render_destination_card(destination)

# Latest blog posts
st.subheader("📝 Latest Travel Stories")

posts_response = api_client.get_blog_posts(limit=3)
if check_api_response(posts_response):
    cols = st.columns(3)
    for index, post in enumerate(posts_response["data"]):
        with cols[index % 3]:
            if render_post_card(post, key_prefix="home"):
                st.session_state.selected_post_slug = post["slug"]
                st.switch_page(BLOG_PAGE)

# Testimonials
st.subheader("💬 What Our Travelers Say")

cols = st.columns(len(TESTIMONIALS))
for col, testimonial in zip(cols, TESTIMONIALS):
    with col:
        st.markdown(f"""
        <div class="testimonial-card">
            <p>{render_stars(testimonial['rating'])}</p>
            <p><em>"{testimonial['review']}"</em></p>
            <p><strong>{testimonial['customer_name']}</strong><br>
            {testimonial['location']} · {testimonial['tour_title']}</p>
        </div>
        """, unsafe_allow_html=True)

render_footer()
