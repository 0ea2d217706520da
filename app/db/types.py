"""Custom column types that behave the same on PostgreSQL and SQLite."""
from __future__ import annotations

import json
from typing import Any, Iterable

from sqlalchemy.dialects.postgresql import ARRAY as PG_ARRAY
from sqlalchemy.types import Text, TypeDecorator


class StringList(TypeDecorator):
    """Tag lists: a native ``text[]`` on PostgreSQL, JSON text elsewhere."""

    impl = Text
    cache_ok = True

    def load_dialect_impl(self, dialect):  # type: ignore[override]
        if dialect.name == "postgresql":
            return dialect.type_descriptor(PG_ARRAY(Text))
        return dialect.type_descriptor(Text())

    def process_bind_param(self, value: Iterable[str] | None, dialect):  # type: ignore[override]
        if value is None:
            return None
        tags = [str(item) for item in value]
        if dialect.name == "postgresql":
            return tags
        return json.dumps(tags)

    def process_result_value(self, value: Any, dialect):  # type: ignore[override]
        if not value:
            return []
        if dialect.name == "postgresql":
            return list(value)
        return json.loads(value)
