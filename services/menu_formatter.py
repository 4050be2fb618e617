"""
Menu Formatter - grouping and text cleanup for display.

This service is pure Python with no Streamlit dependencies.
"""

import re
from datetime import date

from models.meal import MealRow, MealSection, MealsByType


MENU_ITEM_SEPARATOR = "<br/>"

# Allergen class codes, e.g. "쌀밥 5.6.13." or "1.Rice"
ALLERGY_MARKER = re.compile(r"\d+\.")

MEAL_TYPE_ICONS = {
    "조식": "🌅",
    "중식": "🍽️",
    "석식": "🌙",
    "점심": "🍽️",
    "저녁": "🌙",
    "아침": "🌅",
}
DEFAULT_MEAL_ICON = "🍴"

WEEKDAYS = ["월", "화", "수", "목", "금", "토", "일"]


def group_meals_by_type(meals: list[MealRow]) -> MealsByType:
    """Keep the first menu seen for each meal type, in first-seen order."""
    grouped: MealsByType = {}
    for meal in meals:
        if meal.type not in grouped:
            grouped[meal.type] = meal.menu
    return grouped


def format_menu_items(menu: str) -> list[str]:
    """
    Split a DDISH_NM string into clean dish names.

    "1.Rice<br/>2.Soup<br/>" -> ["Rice", "Soup"]
    """
    items = []
    for fragment in menu.split(MENU_ITEM_SEPARATOR):
        if not fragment.strip():
            continue
        item = ALLERGY_MARKER.sub("", fragment).strip()
        if item:
            items.append(item)
    return items


def get_meal_type_icon(meal_type: str) -> str:
    """Icon for a meal type label, with a generic fallback."""
    return MEAL_TYPE_ICONS.get(meal_type, DEFAULT_MEAL_ICON)


def format_date(date_string: str) -> str:
    """
    Render YYYY-MM-DD as a Korean long date.

    "2025-03-04" -> "2025년 3월 4일 화요일". Unparseable input is
    returned as-is.
    """
    try:
        d = date.fromisoformat(date_string)
    except ValueError:
        return date_string
    return f"{d.year}년 {d.month}월 {d.day}일 {WEEKDAYS[d.weekday()]}요일"


def build_meal_sections(meals: list[MealRow]) -> list[MealSection]:
    """One display section per meal type."""
    return [
        MealSection(
            type=meal_type,
            icon=get_meal_type_icon(meal_type),
            items=format_menu_items(menu),
        )
        for meal_type, menu in group_meals_by_type(meals).items()
    ]


def school_name_of(meals: list[MealRow]) -> str:
    """First non-empty school name among the rows."""
    return next((m.school_name for m in meals if m.school_name), "")


def meal_header(date_string: str) -> str:
    return f"{format_date(date_string)} 급식정보"


def empty_state_lines(date_string: str) -> list[str]:
    """Message shown when the day has no meal rows."""
    return [
        f"😔 {format_date(date_string)}에는 급식 정보가 없습니다.",
        "주말이나 공휴일일 수 있습니다.",
    ]
