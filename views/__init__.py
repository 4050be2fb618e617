"""
Views layer - UI presentation components.
"""

from views.meal_view import MealView

__all__ = ["MealView"]
