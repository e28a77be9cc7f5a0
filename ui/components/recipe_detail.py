"""Recipe detail pane - mission, ingredients, build steps, copy."""

import streamlit as st

from partymix.services.amount_formatter import format_amount
from partymix.services.party_session import PartySession


def render_recipe_detail(session: PartySession):
    """Render the detail card for the picked recipe, if any."""
    recipe = session.recipe
    if recipe is None:
        return

    with st.container(border=True):
        # Colour bar
        st.markdown(
            f'<div style="height:8px;background-color:{recipe.color};"></div>',
            unsafe_allow_html=True,
        )

        st.subheader(f"✨ {recipe.name}")
        st.caption(recipe.tagline)

        render_mission_section(session)

        st.divider()

        st.markdown("#### 레시피")
        for ingredient in recipe.ingredients:
            line = f"- **{ingredient.name}**: {format_amount(ingredient)}"
            if ingredient.note:
                line += f" _({ingredient.note})_"
            st.markdown(line)

        if recipe.has_steps:
            st.markdown("**만드는 법**")
            st.markdown("\n".join(f"{n}. {step}" for n, step in enumerate(recipe.howto, start=1)))

        render_copy_section(session)


def render_mission_section(session: PartySession):
    """Current mission with a reroll button."""
    st.markdown("#### 오늘의 랜덤 미션")

    col1, col2 = st.columns([4, 1])

    with col1:
        st.info(session.mission, icon="🎲")

    with col2:
        st.button("🔄 다시 뽑기", key="reroll", on_click=session.reroll)

    count = len(session.pool.candidates(session.picked_id or ""))
    st.caption(f"미션 {count}개 중 하나 ({session.pool.name})")


def render_copy_section(session: PartySession):
    """
    Copy button and the success/failure notice.

    pyperclip writes to the clipboard of the host running the app, so the
    text is always shown too; st.code has its own in-browser copy button.
    """
    if st.button("📋 레시피 복사", key="copy", type="primary"):
        result = session.export()

        if result.success:
            st.success(result.message)
        else:
            st.error(result.message)

        st.code(result.text, language=None)
