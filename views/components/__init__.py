"""
Reusable UI components.
"""

from views.components.meal_card import (
    render_meal_section,
    render_meal_info,
    render_no_meal,
    render_error,
)

__all__ = [
    "render_meal_section",
    "render_meal_info",
    "render_no_meal",
    "render_error",
]
