"""
Models layer - plain data structures for meal rows.
"""

from models.meal import MealRow, MealSection, MealsByType

__all__ = ["MealRow", "MealSection", "MealsByType"]
