"""
Controllers layer - state management and service coordination.
"""

from controllers.meal_controller import MealController, SearchState, SearchStatus

__all__ = ["MealController", "SearchState", "SearchStatus"]
