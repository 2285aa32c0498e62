import streamlit as st
from typing import Dict, Any, Optional

from config import PAGE_ICON, LAYOUT, SITE_NAME
from utils.package_utils import format_price, get_difficulty_color, get_discount_percentage

PLACEHOLDER_IMAGE = "https://images.unsplash.com/photo-1488646953014-85cb44e25828"


def setup_page(title: Optional[str] = None, icon: str = PAGE_ICON):
    """Page config shared by every page; must be the first Streamlit call."""
    st.set_page_config(
        page_title=f"{title} - {SITE_NAME}" if title else SITE_NAME,
        page_icon=icon,
        layout=LAYOUT,
        initial_sidebar_state="expanded"
    )


def init_session_state(**defaults: Any):
    """Initialize session state variables."""
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def check_api_response(response: Dict[str, Any]) -> bool:
    """Show API errors to the user and report whether the call succeeded."""
    if not response.get("success"):
        st.error(f"API Error: {response.get('error', 'Unknown error')}")
        for detail in response.get("details") or []:
            st.caption(f"• {detail}")
    return bool(response.get("success"))


def first_image(document: Dict[str, Any]) -> str:
    images = document.get("images") or []
    return images[0] if images else PLACEHOLDER_IMAGE


def render_stars(rating: float) -> str:
    full = int(round(rating or 0))
    return "★" * full + "☆" * (5 - full)


def render_package_card(package: Dict[str, Any], key_prefix: str = "pkg") -> bool:
    """Render a tour package card; returns True when its details button is clicked."""
    with st.container(border=True):
        st.image(first_image(package), use_container_width=True)
        st.markdown(f"#### {package['title']}")
        st.caption(f"📍 {package['destination']} · ⏱️ {package['duration']}")

        color = get_difficulty_color(package.get("difficulty", ""))
        st.markdown(f":{color}[{package.get('difficulty', '')}] · {package.get('category', '')}")

        price = format_price(package["price"], package.get("currency", "USD"))
        discount = get_discount_percentage(package.get("originalPrice"), package["price"])
        if discount:
            original = format_price(package["originalPrice"], package.get("currency", "USD"))
            st.markdown(f"**{price}** ~~{original}~~ :red[-{discount}%]")
        else:
            st.markdown(f"**{price}**")

        st.caption(f"{render_stars(package.get('rating', 0))} ({package.get('reviewCount', 0)} reviews)")
        return st.button("View details", key=f"{key_prefix}_{package['id']}", use_container_width=True)


def render_destination_card(destination: Dict[str, Any]):
    with st.container(border=True):
        st.image(first_image(destination), use_container_width=True)
        st.markdown(f"#### {destination['name']}, {destination['country']}")
        st.caption(f"🌍 {destination['region']} · Best time: {destination.get('bestTimeToVisit', '')}")
        st.write(destination.get("description", ""))
        st.markdown(
            f"From **{format_price(destination['startingPrice'], destination.get('currency', 'USD'))}** · "
            f"{render_stars(destination.get('averageRating', 0))} ({destination.get('reviewCount', 0)})"
        )
        if destination.get("tags"):
            st.caption(" ".join(f"#{tag}" for tag in destination["tags"]))


def render_post_card(post: Dict[str, Any], key_prefix: str = "post") -> bool:
    """Render a blog post teaser; returns True when 'Read more' is clicked."""
    with st.container(border=True):
        if post.get("featuredImage"):
            st.image(post["featuredImage"], use_container_width=True)
        st.markdown(f"#### {post['title']}")
        st.caption(
            f"✍️ {post['author']['name']} · {post['publishedAt']} · "
            f"{post['readTime']} min read · {post['category']}"
        )
        st.write(post["excerpt"])
        return st.button("Read more", key=f"{key_prefix}_{post['slug']}")


def render_pagination(pagination: Optional[Dict[str, Any]], state_key: str):
    """Previous/next controls bound to a page number in session state."""
    if not pagination or pagination.get("pages", 0) <= 1:
        return

    col1, col2, col3 = st.columns([1, 2, 1])
    with col1:
        if st.button("⬅️ Previous", disabled=pagination["page"] <= 1, key=f"{state_key}_prev"):
            st.session_state[state_key] = pagination["page"] - 1
            st.rerun()
    with col2:
        st.markdown(
            f"<div style='text-align: center;'>Page {pagination['page']} of {pagination['pages']} "
            f"({pagination['total']} results)</div>",
            unsafe_allow_html=True
        )
    with col3:
        if st.button("Next ➡️", disabled=pagination["page"] >= pagination["pages"], key=f"{state_key}_next"):
            st.session_state[state_key] = pagination["page"] + 1
            st.rerun()


def render_footer():
    st.markdown("---")
    st.markdown(f"""
    <div style="text-align: center; color: #666; padding: 1rem;">
        <p>© {SITE_NAME} | Built with ❤️ using Streamlit and FastAPI</p>
    </div>
    """, unsafe_allow_html=True)
