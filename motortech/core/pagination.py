"""Limit/offset pagination shared by every collection endpoint."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Query

from motortech.core.constants import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT


@dataclass(frozen=True)
class Page:
    limit: int = DEFAULT_PAGE_LIMIT
    offset: int = 0

    @classmethod
    def clamp(cls, limit: str | int | None = None, offset: str | int | None = None):
        """Build a page from raw query values.

        Unparseable or non-positive limits fall back to the default; limits
        above the maximum are capped. Unparseable or negative offsets become 0.
        """
        limit_num = _to_int(limit)
        if limit_num is None or limit_num < 1:
            limit_num = DEFAULT_PAGE_LIMIT
        offset_num = _to_int(offset)
        if offset_num is None or offset_num < 0:
            offset_num = 0
        return cls(limit=min(limit_num, MAX_PAGE_LIMIT), offset=offset_num)


def _to_int(value: str | int | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def get_page(
    limit: Annotated[str | None, Query()] = None,
    offset: Annotated[str | None, Query()] = None,
) -> Page:
    return Page.clamp(limit, offset)


PageDep = Annotated[Page, Depends(get_page)]
