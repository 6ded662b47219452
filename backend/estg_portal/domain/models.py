"""
Records received from the REST API.

The API owns every entity; these are render-scoped copies built from the JSON
payloads. Field names follow the API (`_id`, `imageUrl`, `createdAt`, ...) only
inside `from_api`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..constants import ROLE_ADMIN


def _author_name(payload: dict) -> Optional[str]:
    author = payload.get('author')
    if isinstance(author, dict):
        return author.get('username')
    if isinstance(author, str):
        return author
    return None


def _record_id(payload: dict) -> str:
    raw = payload.get('_id', payload.get('id'))
    return '' if raw is None else str(raw)


@dataclass
class Profile:
    username: str
    email: str
    role: Optional[str] = None
    avatar: Optional[str] = None
    backup_code: Optional[str] = None

    @classmethod
    def from_api(cls, payload: dict) -> Profile:
        return cls(
            username=payload.get('user') or payload.get('username') or '',
            email=payload.get('email') or '',
            role=payload.get('role'),
            avatar=payload.get('avatar') or None,
            backup_code=payload.get('backupCode'),
        )

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    @property
    def initial(self) -> str:
        return (self.username[:1] or 'A').upper()


@dataclass
class Event:
    id: str
    title: str
    description: str
    image_url: Optional[str] = None
    author: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_api(cls, payload: dict) -> Event:
        return cls(
            id=_record_id(payload),
            title=payload.get('title') or '',
            description=payload.get('description') or '',
            image_url=payload.get('imageUrl') or None,
            author=_author_name(payload),
            created_at=payload.get('createdAt'),
        )


@dataclass
class Update:
    id: str
    title: str
    description: str
    type: Optional[str] = None
    file_url: Optional[str] = None
    author: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_api(cls, payload: dict) -> Update:
        return cls(
            id=_record_id(payload),
            title=payload.get('title') or '',
            description=payload.get('description') or '',
            type=payload.get('type'),
            file_url=payload.get('fileUrl') or None,
            author=_author_name(payload),
            created_at=payload.get('createdAt'),
        )


@dataclass
class ContentCreator:
    id: str
    username: str
    email: str
    role: Optional[str] = None
    phone: Optional[str] = None
    backup_code: Optional[str] = None

    @classmethod
    def from_api(cls, payload: dict) -> ContentCreator:
        backup = payload.get('backupCodeDecimal', payload.get('backupCode'))
        return cls(
            id=_record_id(payload),
            username=payload.get('username') or '',
            email=payload.get('email') or '',
            role=payload.get('role'),
            phone=payload.get('phone') or None,
            backup_code=None if backup in (None, '') else str(backup),
        )


def unwrap_collection(payload: Any) -> list:
    """Event and update collections arrive as {"data": [...]}; creators arrive bare."""
    if isinstance(payload, dict):
        payload = payload.get('data', [])
    return payload if isinstance(payload, list) else []
