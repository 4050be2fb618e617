"""
Meal result components.
"""

import streamlit as st

from models.meal import MealSection
from services.menu_formatter import empty_state_lines, meal_header

ERROR_MESSAGE = "급식 정보를 불러오지 못했습니다. 잠시 후 다시 시도해 주세요."


def render_meal_section(section: MealSection):
    """Render one meal type: heading and its dishes."""
    with st.container(border=True):
        st.markdown(f"### {section.heading}")
        for item in section.items:
            st.markdown(f"- {item}")


def render_meal_info(date: str, sections: list[MealSection], school_name: str = ""):
    """
    Render the meals for a date.

    Args:
        date: Selected date (YYYY-MM-DD)
        sections: One entry per meal type, in display order
        school_name: Caption under the header, omitted when empty
    """
    st.subheader(meal_header(date))
    if school_name:
        st.caption(school_name)

    for section in sections:
        render_meal_section(section)


def render_no_meal(date: str):
    """Render the empty state for a day without meals."""
    st.info("\n\n".join(empty_state_lines(date)))


def render_error():
    """Render the generic error panel."""
    st.error(ERROR_MESSAGE)
