"""
School Meal Lookup - Home Page

Pick a date and see the breakfast/lunch/dinner menu served at the
configured school, straight from the NEIS open-data API.
"""

import logging

import streamlit as st

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title="급식 조회",
    page_icon="🍱",
    layout="centered"
)

from config.settings import get_settings
from views.meal_view import MealView

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

view = MealView()
view.render()
