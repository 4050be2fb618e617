"""
Meal Controller - manages the meal search flow and state.

This controller handles:
- The search state machine (idle, loading, success, empty, error)
- Calling the NEIS client for a date
- Fencing out stale responses when searches overlap

The transition functions are pure; MealController stores the current
SearchState in Streamlit session state (or any mapping passed in).
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import date as date_type
from enum import Enum
from typing import MutableMapping, Optional

import streamlit as st

from models.meal import MealRow
from services.neis_client import NeisMealClient

logger = logging.getLogger(__name__)

STATE_KEY = "meal_search"
DATE_REQUIRED_MESSAGE = "날짜를 선택해 주세요."


class SearchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    EMPTY = "empty"
    ERROR = "error"


@dataclass(frozen=True)
class SearchState:
    """Snapshot of the meal panel."""
    status: SearchStatus = SearchStatus.IDLE
    date: str = ""
    meals: list[MealRow] = field(default_factory=list)
    loading: bool = False
    error_visible: bool = False
    request_id: int = 0

    @property
    def is_idle(self) -> bool:
        """Ready for a new search (nothing in flight)."""
        return not self.loading


def default_date() -> str:
    """Today's local date as YYYY-MM-DD."""
    return date_type.today().isoformat()


# ==========================================
# Transitions
# ==========================================

def start_search(state: SearchState, date: str) -> SearchState:
    """Enter LOADING: clear results, hide the error panel, show the spinner."""
    return SearchState(
        status=SearchStatus.LOADING,
        date=date,
        meals=[],
        loading=True,
        error_visible=False,
        request_id=state.request_id + 1,
    )


def complete_search(state: SearchState, request_id: int, meals: list[MealRow]) -> SearchState:
    """Finish a search with rows (SUCCESS) or without (EMPTY)."""
    if request_id != state.request_id:
        return state
    return replace(
        state,
        status=SearchStatus.SUCCESS if meals else SearchStatus.EMPTY,
        meals=list(meals),
        loading=False,
        error_visible=False,
    )


def fail_search(state: SearchState, request_id: int) -> SearchState:
    """Finish a search with the error panel shown and results cleared."""
    if request_id != state.request_id:
        return state
    return replace(
        state,
        status=SearchStatus.ERROR,
        meals=[],
        loading=False,
        error_visible=True,
    )


class MealController:
    """Controller for the meal lookup page."""

    def __init__(
        self,
        client: Optional[NeisMealClient] = None,
        session_state: Optional[MutableMapping] = None,
    ):
        self.client = client or NeisMealClient()
        self._session = st.session_state if session_state is None else session_state
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if STATE_KEY not in self._session:
            self._session[STATE_KEY] = SearchState()

    # Session state accessors
    def get_state(self) -> SearchState:
        return self._session[STATE_KEY]

    def _set_state(self, state: SearchState):
        self._session[STATE_KEY] = state

    def get_default_date(self) -> str:
        return default_date()

    def submit_search(self, date: Optional[str]) -> tuple[bool, Optional[str]]:
        """
        Run a search for a YYYY-MM-DD date.

        Returns (searched, prompt). An empty date leaves the state alone
        and returns the prompt to show instead.
        """
        if not date:
            return False, DATE_REQUIRED_MESSAGE

        state = start_search(self.get_state(), date)
        self._set_state(state)
        request_id = state.request_id

        try:
            meals = self.client.fetch_meal_data(date)
        except Exception as e:
            logger.error(f"급식정보 조회 오류: {e}")
            self._set_state(fail_search(self.get_state(), request_id))
        else:
            self._set_state(complete_search(self.get_state(), request_id, meals))

        return True, None
