"""
Meal View - UI for the school meal lookup.

This view handles all rendering for the meal page.
It delegates search logic to the MealController.
"""

from datetime import date

import streamlit as st

from controllers.meal_controller import MealController, SearchState, SearchStatus
from services.menu_formatter import build_meal_sections, school_name_of
from views.components.meal_card import render_error, render_meal_info, render_no_meal


class MealView:
    """View for the meal lookup page."""

    def __init__(self, controller: MealController | None = None):
        self.controller = controller or MealController()

    def render(self):
        """Main render method - search form, then the current result."""
        st.title("🍱 오늘의 급식")

        self._render_search_form()
        self.render_result(self.controller.get_state())

    def _render_search_form(self):
        """Date picker and search button. Enter inside the form submits too."""
        with st.form("meal_search_form"):
            selected = st.date_input(
                "날짜",
                value=date.fromisoformat(self.controller.get_default_date()),
                format="YYYY-MM-DD",
            )
            submitted = st.form_submit_button("급식 조회", type="primary", use_container_width=True)

        if submitted:
            selected_date = selected.isoformat() if selected else ""
            with st.spinner("급식 정보를 불러오는 중..."):
                _, prompt = self.controller.submit_search(selected_date)
            if prompt:
                st.warning(prompt)

    def render_result(self, state: SearchState):
        """Render the outcome of the last search."""
        if state.status == SearchStatus.SUCCESS:
            render_meal_info(
                state.date,
                build_meal_sections(state.meals),
                school_name=school_name_of(state.meals),
            )
        elif state.status == SearchStatus.EMPTY:
            render_no_meal(state.date)
        elif state.error_visible:
            render_error()
