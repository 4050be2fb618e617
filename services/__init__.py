"""
Services layer - pure business logic, no Streamlit dependencies.
"""

from services.errors import (
    MealServiceError,
    MealNetworkError,
    MealParseError,
    MealNotFoundError,
)
from services.neis_client import NeisMealClient
from services.meal_parser import parse_xml_data
from services.menu_formatter import (
    group_meals_by_type,
    format_menu_items,
    get_meal_type_icon,
    format_date,
    build_meal_sections,
)

__all__ = [
    "MealServiceError",
    "MealNetworkError",
    "MealParseError",
    "MealNotFoundError",
    "NeisMealClient",
    "parse_xml_data",
    "group_meals_by_type",
    "format_menu_items",
    "get_meal_type_icon",
    "format_date",
    "build_meal_sections",
]
