"""
PartyMix Streamlit Application

Main entry point for the UI. Catalog on the left, picked recipe on the right.

Run with: streamlit run ui/app.py
"""

import logging
from datetime import datetime

import streamlit as st

from partymix.catalog import get_mission_pool, get_recipes
from partymix.services.party_session import PartySession
from ui.components.recipe_detail import render_recipe_detail
from ui.components.recipe_list import render_recipe_list
from ui.config import get_settings

# Page configuration
settings = get_settings()
st.set_page_config(
    page_title=settings.page_title,
    page_icon=settings.page_icon or None,
    layout="wide",
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

SESSION_KEY = "party_session"


def get_session() -> PartySession:
    """Get (or create) this browser session's PartySession."""
    if SESSION_KEY not in st.session_state:
        pool = get_mission_pool(settings.mission_pack)
        st.session_state[SESSION_KEY] = PartySession(recipes=get_recipes(), pool=pool)
        logger.info(f"New party session with mission pack '{pool.name}'")
    return st.session_state[SESSION_KEY]


def render_header():
    """Title row."""
    col1, col2 = st.columns([6, 1])
    with col1:
        st.title(f"{settings.page_icon} {settings.page_title}".strip())
    with col2:
        st.caption("MVP")


def render_footer():
    st.divider()
    st.caption(
        f"© {datetime.now().year} Cocktail Party Helper — have fun & drink responsibly 🍸"
    )


def main():
    """Main application entry point."""
    session = get_session()
    session.start()

    render_header()

    col_list, col_detail = st.columns([1, 2], gap="large")

    with col_list:
        render_recipe_list(session)

    with col_detail:
        render_recipe_detail(session)

    if settings.show_footer:
        render_footer()


if __name__ == "__main__":
    main()
