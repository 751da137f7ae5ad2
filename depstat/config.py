"""
Analyse options shared by the CLI and the HTTP API.
"""
from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel

ENV_ORDER = "DEPSTAT_ORDER"
ENV_LIMIT = "DEPSTAT_LIMIT"


class AnalyseOptions(BaseModel):
    # "" or any unrecognised value means: emit the unordered mapping
    order: str = ""
    # <= 0 means no truncation
    limit: int = 0

    @classmethod
    def from_env(cls, order: Optional[str] = None, limit: Optional[int] = None) -> "AnalyseOptions":
        """
        Fill options the caller left as None from DEPSTAT_ORDER / DEPSTAT_LIMIT.

        An environment value is only read (and validated) when it is used.
        """
        if order is None:
            order = (os.getenv(ENV_ORDER) or "").strip()
        if limit is None:
            raw_limit = (os.getenv(ENV_LIMIT) or "0").strip()
            try:
                limit = int(raw_limit)
            except ValueError:
                raise ValueError(f"{ENV_LIMIT} must be an integer, got {raw_limit!r}") from None
        return cls(order=order, limit=limit)
