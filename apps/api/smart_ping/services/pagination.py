from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from smart_ping.core.config import settings
from smart_ping.core.errors import ValidationError


@dataclass(frozen=True)
class PageWindow:
    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def pages_for(self, total: int) -> int:
        return math.ceil(total / self.limit)


def page_window(page: Optional[int] = None, limit: Optional[int] = None) -> PageWindow:
    page = 1 if page is None else page
    limit = settings.DEFAULT_PAGE_LIMIT if limit is None else limit
    if page < 1:
        raise ValidationError("page must be >= 1")
    if limit < 1:
        raise ValidationError("limit must be >= 1")
    return PageWindow(page=page, limit=limit)
