"""Cursor encoding and decoding for transaction pagination.

A cursor is a ``PageOptions`` value that may carry navigation metadata
under the ``_cursorMeta`` key. The metadata holds the retained navigation
history so that a page handle rebuilt from the cursor, possibly in a
different process, can still step backwards.

The cursor format is:
1. JSON object with camelCase option fields plus optional ``_cursorMeta``
2. Base64 URL-safe encoded for use in URLs

Example cursor payload:
    {"pageSize": 5, "startBlock": 100,
     "_cursorMeta": {"currentPageIndex": 1, "navigationHistory": [{"pageSize": 5}, {...}],
                     "canGoBack": true, "canGoForward": true,
                     "previousPageOptions": {"pageSize": 5}, "nextPageOptions": null}}

A cursor without ``_cursorMeta`` means "resume forward-only from these options".
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from translate_sdk.core.exceptions import InvalidCursorError
from translate_sdk.core.pagination.options import PageOptions

CURSOR_META_KEY = "_cursorMeta"


def _options_or_none(options: PageOptions | None) -> dict[str, Any] | None:
    return options.to_wire() if options is not None else None


class CursorMeta(BaseModel):
    """Navigation metadata embedded in an enhanced cursor.

    Attributes:
        current_page_index: Position of the cursor's page within ``navigation_history``.
        navigation_history: Options of the retained pages, oldest first.
        can_go_back: True when an earlier page exists, retained or not.
        can_go_forward: True when a page after the cursor's page was known at encode time.
        previous_page_options: Options of the page before the cursor's page.
        next_page_options: Options of the page after the cursor's page.
        original_page_index: Absolute position of the cursor's page when the history was truncated.
        history_start_index: Absolute position of ``navigation_history[0]`` when truncated.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    current_page_index: int = Field(ge=0)
    navigation_history: list[PageOptions] = Field(min_length=1)
    can_go_back: bool
    can_go_forward: bool
    previous_page_options: PageOptions | None = None
    next_page_options: PageOptions | None = None
    original_page_index: int | None = Field(default=None, ge=0)
    history_start_index: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_index(self) -> CursorMeta:
        if self.current_page_index >= len(self.navigation_history):
            msg = (
                f"currentPageIndex {self.current_page_index} outside navigationHistory "
                f"of {len(self.navigation_history)} entries"
            )
            raise ValueError(msg)
        return self

    @property
    def absolute_page_index(self) -> int:
        """Absolute position of the cursor's page in the original session."""
        if self.original_page_index is not None:
            return self.original_page_index
        return (self.history_start_index or 0) + self.current_page_index

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "currentPageIndex": self.current_page_index,
            "navigationHistory": [entry.to_wire() for entry in self.navigation_history],
            "canGoBack": self.can_go_back,
            "canGoForward": self.can_go_forward,
            "previousPageOptions": _options_or_none(self.previous_page_options),
            "nextPageOptions": _options_or_none(self.next_page_options),
        }
        if self.original_page_index is not None:
            payload["originalPageIndex"] = self.original_page_index
        if self.history_start_index is not None:
            payload["historyStartIndex"] = self.history_start_index
        return payload


class EnhancedCursorData(PageOptions):
    """Page options plus optional navigation metadata."""

    cursor_meta: CursorMeta | None = Field(default=None, alias=CURSOR_META_KEY)

    @property
    def is_enhanced(self) -> bool:
        return self.cursor_meta is not None

    def page_options(self) -> PageOptions:
        """Strip the metadata, leaving the options that fetch the cursor's page."""
        return PageOptions.from_wire(self.options_wire())

    def options_wire(self) -> dict[str, Any]:
        payload = self.model_dump(
            mode="json",
            by_alias=True,
            exclude_none=True,
            exclude={"cursor_meta"},
        )
        payload.pop(CURSOR_META_KEY, None)
        return payload

    def to_wire(self) -> dict[str, Any]:
        payload = self.options_wire()
        if self.cursor_meta is not None:
            payload[CURSOR_META_KEY] = self.cursor_meta.to_wire()
        return payload

    @classmethod
    def build(cls, options: PageOptions, meta: CursorMeta | None = None) -> EnhancedCursorData:
        payload = options.to_wire()
        if meta is not None:
            payload[CURSOR_META_KEY] = meta.to_wire()
        return cls.model_validate(payload)


class CursorCodec:
    """Encode and decode pagination cursors.

    Cursors are URL-safe base64 strings over compact, key-sorted JSON, so
    equal cursor data always yields the same token.

    Usage:
        # Encoding
        token = CursorCodec.encode(EnhancedCursorData.build(options, meta))

        # Decoding
        data = CursorCodec.decode(token)
        print(data.page_options(), data.cursor_meta)
    """

    @staticmethod
    def encode(data: EnhancedCursorData | PageOptions) -> str:
        """Encode cursor data to an opaque string.

        Args:
            data: Options, with or without navigation metadata.

        Returns:
            URL-safe base64 encoded string
        """
        json_str = json.dumps(data.to_wire(), separators=(",", ":"), sort_keys=True)
        return base64.urlsafe_b64encode(json_str.encode()).decode()

    @staticmethod
    def decode(cursor: str) -> EnhancedCursorData:
        """Decode a cursor string to cursor data.

        Standard base64 tokens are accepted as well as URL-safe ones.

        Args:
            cursor: Base64 encoded cursor string

        Returns:
            EnhancedCursorData with the page options and optional metadata

        Raises:
            InvalidCursorError: If cursor is malformed, truncated or fails validation
        """
        if not isinstance(cursor, str) or not cursor.strip():
            raise InvalidCursorError(extra={"reason": "empty cursor"})

        try:
            raw = base64.urlsafe_b64decode(cursor.strip().encode())
            payload = json.loads(raw.decode())
        except (binascii.Error, ValueError) as e:
            raise InvalidCursorError(extra={"reason": str(e)}) from e

        if not isinstance(payload, dict):
            raise InvalidCursorError(extra={"reason": "cursor payload is not an object"})

        try:
            return EnhancedCursorData.model_validate(payload)
        except ValidationError as e:
            raise InvalidCursorError(extra={"reason": str(e)}) from e

    @staticmethod
    def is_enhanced(payload: Any) -> bool:
        """Check whether decoded data (model or mapping) carries navigation metadata."""
        if isinstance(payload, EnhancedCursorData):
            return payload.cursor_meta is not None
        return isinstance(payload, dict) and CURSOR_META_KEY in payload


__all__ = ["CURSOR_META_KEY", "CursorCodec", "CursorMeta", "EnhancedCursorData"]
