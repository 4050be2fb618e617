"""
NEIS meal service client.

NEIS Open API: https://open.neis.go.kr/portal/data/service/selectServicePage.do

Endpoint used:
- GET /hub/mealServiceDietInfo - meals served at one school on one day

The browser page this replaces had to go through a CORS proxy, so by
default the upstream URL is percent-encoded and appended to the proxy
prefix. Set MEAL_USE_PROXY=false to call NEIS directly.
"""

import logging
from typing import Optional
from urllib.parse import quote, urlencode

import httpx

from config.settings import Settings, get_settings
from models.meal import MealRow
from services.errors import MealNetworkError
from services.meal_parser import parse_xml_data

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone besides A-Z a-z 0-9 - _ . ~
URI_COMPONENT_SAFE = "!*'()"


def to_api_date(date: str) -> str:
    """YYYY-MM-DD -> YYYYMMDD"""
    return date.replace("-", "")


class NeisMealClient:
    """Fetches and parses one day of meals for the configured school."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport

    def build_meal_url(self, date: str) -> str:
        """Upstream NEIS URL for a YYYY-MM-DD date."""
        params = {}
        if self.settings.neis_api_key:
            params["KEY"] = self.settings.neis_api_key
        params["ATPT_OFCDC_SC_CODE"] = self.settings.office_code
        params["SD_SCHUL_CODE"] = self.settings.school_code
        params["MLSV_YMD"] = to_api_date(date)
        return f"{self.settings.neis_api_url}?{urlencode(params)}"

    def build_request_url(self, date: str) -> str:
        """URL actually requested: the NEIS URL, proxied unless disabled."""
        api_url = self.build_meal_url(date)
        if not self.settings.use_proxy:
            return api_url
        return self.settings.proxy_url + quote(api_url, safe=URI_COMPONENT_SAFE)

    def fetch_xml(self, date: str) -> str:
        """
        Issue the GET and return the body text.

        Raises:
            MealNetworkError: transport failure or non-2xx status
        """
        url = self.build_request_url(date)
        try:
            with httpx.Client(transport=self._transport) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Meal API error: {e.response.status_code} - {url}")
            raise MealNetworkError() from e
        except httpx.RequestError as e:
            logger.error(f"Meal API request failed: {e}")
            raise MealNetworkError() from e

        return response.text

    def fetch_meal_data(self, date: str) -> list[MealRow]:
        """
        Fetch and parse meals for a YYYY-MM-DD date.

        Returns:
            MealRows in payload order, empty when the day has none

        Raises:
            MealServiceError: network, parse, or upstream result-code failure
        """
        xml_text = self.fetch_xml(date)
        meals = parse_xml_data(
            xml_text,
            no_data_as_empty=self.settings.no_data_as_empty,
        )
        logger.info(f"Fetched {len(meals)} meal rows for {date}")
        return meals
