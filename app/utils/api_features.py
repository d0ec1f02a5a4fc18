# /app/utils/api_features.py
from typing import Iterable, Mapping

from sqlalchemy import or_
from sqlalchemy.orm import Query


class ApiFeatures:
    """
    쿼리 파라미터로부터 검색(keyword)과 필터 조건을 SQLAlchemy Query 에 적용합니다.

    - search(): keyword 를 search_fields 에 대해 대소문자 무시 부분일치로 검색
    - filter(): 예약 키(keyword, page, limit)를 제외한 파라미터 중
      filter_fields 에 있는 컬럼만 동등 조건으로 적용 (그 외 키는 무시)
    """

    RESERVED_KEYS = ("keyword", "page", "limit")

    def __init__(
        self,
        query: Query,
        query_params: Mapping[str, str],
        model,
        search_fields: Iterable[str] = (),
        filter_fields: Iterable[str] = (),
    ):
        self.query = query
        self.query_params = dict(query_params)
        self.model = model
        self.search_fields = tuple(search_fields)
        self.filter_fields = tuple(filter_fields)

    def search(self) -> "ApiFeatures":
        keyword = (self.query_params.get("keyword") or "").strip()
        if keyword and self.search_fields:
            # %, _ 는 와일드카드가 아닌 문자 그대로 검색
            escaped = keyword.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
            pattern = f"%{escaped}%"
            self.query = self.query.filter(
                or_(*[getattr(self.model, field).ilike(pattern, escape="\\") for field in self.search_fields])
            )
        return self

    def filter(self) -> "ApiFeatures":
        for key, value in self.query_params.items():
            if key in self.RESERVED_KEYS or key not in self.filter_fields:
                continue
            self.query = self.query.filter(getattr(self.model, key) == value)
        return self


def parse_page(value) -> int:
    """ 숫자가 아니거나 1 미만이면 1 페이지 """
    try:
        page = int(value)
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1
