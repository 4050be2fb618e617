# tests/conftest.py
from __future__ import annotations

import pytest

from config.settings import Settings

MEALS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<mealServiceDietInfo>
  <head>
    <list_total_count>4</list_total_count>
    <RESULT>
      <CODE>INFO-000</CODE>
      <MESSAGE>정상 처리되었습니다.</MESSAGE>
    </RESULT>
  </head>
  <row>
    <MLSV_YMD>20250304</MLSV_YMD>
    <MMEAL_SC_NM>조식</MMEAL_SC_NM>
    <DDISH_NM><![CDATA[토스트 1.2.<br/>우유 2.]]></DDISH_NM>
    <SCHUL_NM>경기테스트고등학교</SCHUL_NM>
  </row>
  <row>
    <MLSV_YMD>20250304</MLSV_YMD>
    <MMEAL_SC_NM>중식</MMEAL_SC_NM>
    <DDISH_NM><![CDATA[1.쌀밥<br/>2.미역국 5.6.<br/>]]></DDISH_NM>
    <SCHUL_NM>경기테스트고등학교</SCHUL_NM>
  </row>
  <row>
    <MLSV_YMD>20250304</MLSV_YMD>
    <MMEAL_SC_NM>중식</MMEAL_SC_NM>
    <DDISH_NM><![CDATA[잡곡밥<br/>된장국]]></DDISH_NM>
    <SCHUL_NM>경기테스트고등학교</SCHUL_NM>
  </row>
  <row>
    <MLSV_YMD>20250304</MLSV_YMD>
    <MMEAL_SC_NM>석식</MMEAL_SC_NM>
    <DDISH_NM><![CDATA[카레라이스 13.]]></DDISH_NM>
    <SCHUL_NM>경기테스트고등학교</SCHUL_NM>
  </row>
</mealServiceDietInfo>
"""

EMPTY_SUCCESS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<mealServiceDietInfo>
  <head>
    <list_total_count>0</list_total_count>
    <RESULT><CODE>INFO-000</CODE><MESSAGE>정상 처리되었습니다.</MESSAGE></RESULT>
  </head>
</mealServiceDietInfo>
"""

NO_DATA_XML = """<?xml version="1.0" encoding="UTF-8"?>
<RESULT>
  <CODE>INFO-200</CODE>
  <MESSAGE>해당하는 데이터가 없습니다.</MESSAGE>
</RESULT>
"""


@pytest.fixture
def settings() -> Settings:
    return Settings(
        neis_api_url="https://open.neis.go.kr/hub/mealServiceDietInfo",
        office_code="J10",
        school_code="7530079",
        neis_api_key=None,
        proxy_url="https://api.allorigins.win/raw?url=",
        use_proxy=True,
        no_data_as_empty=False,
    )
