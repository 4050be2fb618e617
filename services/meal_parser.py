"""
Meal Parser - turns a NEIS mealServiceDietInfo XML body into MealRows.

A successful response looks like:

    <mealServiceDietInfo>
      <head>
        <list_total_count>3</list_total_count>
        <RESULT><CODE>INFO-000</CODE><MESSAGE>정상 처리되었습니다.</MESSAGE></RESULT>
      </head>
      <row>
        <MLSV_YMD>20250304</MLSV_YMD>
        <MMEAL_SC_NM>중식</MMEAL_SC_NM>
        <DDISH_NM><![CDATA[쌀밥<br/>미역국 5.6.]]></DDISH_NM>
        <SCHUL_NM>...</SCHUL_NM>
      </row>
    </mealServiceDietInfo>

Days without meals come back as a bare <RESULT> document with INFO-200.
This module has no Streamlit dependencies.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Optional

from models.meal import MealRow
from services.errors import MealNotFoundError, MealParseError

logger = logging.getLogger(__name__)

SUCCESS_CODE = "INFO-000"
NO_DATA_CODE = "INFO-200"

# MealRow attribute -> NEIS element name
ROW_FIELDS = {
    "date": "MLSV_YMD",
    "type": "MMEAL_SC_NM",
    "menu": "DDISH_NM",
    "school_name": "SCHUL_NM",
}


def find_result_code(root: ET.Element) -> Optional[str]:
    """
    Return the first RESULT/CODE value in the document, or None.

    RESULT may be the document root (error responses) or sit under
    <head> (success responses); iter() covers both.
    """
    for result in root.iter("RESULT"):
        code = result.find("CODE")
        if code is not None:
            return (code.text or "").strip()
    return None


def field_text(row: ET.Element, tag: str) -> str:
    """All text inside a child element, including nested elements."""
    element = row.find(tag)
    if element is None:
        return ""
    return "".join(element.itertext())


def parse_row(row: ET.Element) -> MealRow:
    """Build a MealRow from a <row> element, missing fields become ''."""
    values = {attr: field_text(row, tag) for attr, tag in ROW_FIELDS.items()}
    return MealRow(**values)


def parse_xml_data(xml_text: str, no_data_as_empty: bool = False) -> list[MealRow]:
    """
    Parse a meal service response.

    Args:
        xml_text: Raw response body
        no_data_as_empty: Treat the INFO-200 "no data" code as zero rows
            instead of an error

    Returns:
        MealRows in document order (possibly empty)

    Raises:
        MealParseError: body is not well-formed XML
        MealNotFoundError: result code present and not INFO-000
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        logger.warning(f"Malformed meal XML: {e}")
        raise MealParseError() from e

    code = find_result_code(root)
    if code is not None and code != SUCCESS_CODE:
        if no_data_as_empty and code == NO_DATA_CODE:
            return []
        raise MealNotFoundError(code)

    return [parse_row(row) for row in root.iter("row")]
