"""
Key-Value Store - Durable string storage for scoreboard values.

Values are JSON-encoded and kept in a single SQLite table. The store never
raises: failures are logged and reported through an optional callback,
and loads fall back to the caller's default.
"""

import json
import logging
from typing import Any, Callable, Optional, TypeVar

from pydantic import TypeAdapter
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError

from models.base import get_session, init_db
from models.stored_value import StoredValue


logger = logging.getLogger(__name__)

T = TypeVar("T")

ErrorCallback = Callable[[str], None]


class KeyValueStore:
    """
    Best-effort key-value store backed by SQLAlchemy.

    A store created without an engine behaves as if no storage exists:
    saves are dropped and loads return the default.
    """

    def __init__(self, engine: Optional[Engine], on_error: Optional[ErrorCallback] = None):
        self._engine = engine
        self._on_error = on_error
        if self._engine is not None:
            try:
                init_db(self._engine)
            except SQLAlchemyError as e:
                self._report("Storage unavailable", e)
                self._engine = None

    @property
    def available(self) -> bool:
        return self._engine is not None

    def save(self, key: str, value: Any) -> bool:
        """
        Serialize a value and store it under key.

        Returns:
            True if the value was written
        """
        if self._engine is None:
            return False
        try:
            text = json.dumps(value)
            with get_session(self._engine) as session:
                session.merge(StoredValue(key=key, value=text))
        except (SQLAlchemyError, OSError, TypeError, ValueError) as e:
            self._report(f"Failed to save {key!r}", e)
            return False
        return True

    def load(self, key: str, default: T, schema: Optional[TypeAdapter] = None) -> T:
        """
        Load the value stored under key.

        Args:
            key: Storage key
            default: Returned when the key is missing, unreadable or invalid
            schema: Optional pydantic TypeAdapter the decoded value must pass

        Returns:
            The decoded (and validated) value, or default
        """
        if self._engine is None:
            return default
        try:
            with get_session(self._engine) as session:
                row = session.get(StoredValue, key)
                text = row.value if row is not None else None
            if not text:
                return default
            value = json.loads(text)
            if schema is not None:
                value = schema.validate_python(value)
            return value
        except (SQLAlchemyError, OSError, ValueError) as e:
            self._report(f"Failed to load {key!r}", e)
            return default

    def _report(self, message: str, error: Exception) -> None:
        logger.warning("%s: %s", message, error)
        if self._on_error is not None:
            self._on_error(f"{message}: {error}")
