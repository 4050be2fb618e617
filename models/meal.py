"""
Meal data structures.

MealRow mirrors one <row> of the NEIS mealServiceDietInfo response.
Only the four fields the page displays are kept.
"""

from dataclasses import dataclass, field


# Meal-type label -> raw menu string, in first-seen order
MealsByType = dict[str, str]


@dataclass
class MealRow:
    """One meal service entry for a single date."""
    date: str = ""  # MLSV_YMD, YYYYMMDD
    type: str = ""  # MMEAL_SC_NM, e.g. "중식"
    menu: str = ""  # DDISH_NM, dishes joined by <br/>
    school_name: str = ""  # SCHUL_NM


@dataclass
class MealSection:
    """Display block for one meal type."""
    type: str
    icon: str
    items: list[str] = field(default_factory=list)

    @property
    def heading(self) -> str:
        return f"{self.icon} {self.type}"
