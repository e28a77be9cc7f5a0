"""Recipe list pane - pick a cocktail from the catalog."""

import streamlit as st

from partymix.services.party_session import PartySession


def render_swatch(color: str, size: int = 24):
    """Small round colour chip for a recipe."""
    st.markdown(
        f'<div style="width:{size}px;height:{size}px;border-radius:50%;'
        f'background-color:{color};"></div>',
        unsafe_allow_html=True,
    )


def render_recipe_list(session: PartySession):
    """Render one card per recipe; clicking a card selects it."""
    for recipe in session.recipes:
        selected = recipe.id == session.picked_id

        with st.container(border=True):
            col1, col2 = st.columns([5, 1])

            with col1:
                st.button(
                    recipe.name,
                    key=f"pick_{recipe.id}",
                    type="primary" if selected else "secondary",
                    on_click=session.select,
                    args=(recipe.id,),
                )
                st.caption(recipe.tagline)

            with col2:
                render_swatch(recipe.color)
