"""
Shared list behaviour for every collection page.

- fetch_list: one API call, success -> records, failure -> logged and empty
- filter_records: case-insensitive substring search over one or two text fields
- ListState: what a list template needs (snapshot, search term, empty/no-match flags)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from ..common.exceptions import ApiAuthError, ApiError
from ..config.logging_config import content_logger
from .models import unwrap_collection


def filter_records(records: Sequence, term: str, fields: Sequence[str] = ('title', 'description')) -> list:
    """Returns the records whose fields contain `term`, ignoring case. Empty term keeps everything."""
    if not term:
        return list(records)
    needle = term.lower()
    matches = []
    for record in records:
        for name in fields:
            value = getattr(record, name, None) or ''
            if needle in str(value).lower():
                matches.append(record)
                break
    return matches


@dataclass
class ListState:
    items: list = field(default_factory=list)
    search: str = ''
    fields: tuple = ('title', 'description')
    error: Optional[str] = None

    @property
    def filtered(self) -> list:
        return filter_records(self.items, self.search, self.fields)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def no_match(self) -> bool:
        return bool(self.search) and bool(self.items) and not self.filtered


def fetch_list(loader: Callable[[], object], factory: Callable[[dict], object], label: str,
               search: str = '', fields: tuple = ('title', 'description')) -> ListState:
    """
    Runs the fetch-list contract for one collection.

    A 401 is re-raised so the session gate can redirect; any other API failure is
    logged and yields an empty list carrying the error message.
    """
    try:
        payload = loader()
    except ApiAuthError:
        raise
    except ApiError as e:
        content_logger.error(f"Error fetching {label}: {e.message} {e.details}")
        return ListState(items=[], search=search, fields=fields, error=e.message)

    items = [factory(row) for row in unwrap_collection(payload) if isinstance(row, dict)]
    content_logger.debug(f"Fetched {len(items)} {label}")
    return ListState(items=items, search=search, fields=fields)
