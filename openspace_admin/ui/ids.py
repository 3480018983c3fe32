from __future__ import annotations

from typing import Any

__all__ = ["IDs", "entity_id", "pattern_id"]


class IDs:
    class Store:
        SESSION_ID = "session-id"

    class Control:
        PAGE_TABS = "page-tabs"

        # Notifications (navbar)
        NOTIFICATIONS_MENU = "notifications-menu"
        NOTIFICATIONS_LIST = "notifications-list"
        NOTIFICATIONS_MARK_ALL = "notifications-mark-all"

        # Detail modals
        DETAIL_MODAL = "detail-modal"
        DETAIL_MODAL_TITLE = "detail-modal-title"
        DETAIL_MODAL_BODY = "detail-modal-body"
        DETAIL_MODAL_CLOSE = "detail-modal-close"
        LOCATION_MODAL = "location-modal"
        LOCATION_MODAL_BODY = "location-modal-body"
        LOCATION_MODAL_CLOSE = "location-modal-close"

    class Entity:
        # suffixes, combined with the entity key by entity_id()
        VIEW_VERSION = "view-version"
        LOADING = "loading"
        STATS = "stats"
        SEARCH = "search"
        REFRESH_BTN = "refresh-btn"
        EXPORT_BTN = "export-btn"
        DOWNLOAD = "download"
        ALERT = "alert"
        TABLE = "table"
        PAGINATION = "pagination"
        PAGE_SIZE = "page-size"
        RANGE_TEXT = "range-text"

    class Pattern:
        # pattern-matching "type" strings
        CATEGORY = "category-chip"
        RESOLVE = "resolve-record"
        UNRESOLVE = "unresolve-record"
        DETAILS = "record-details"
        LOCATION = "record-location"
        NOTIFICATION_ITEM = "notification-item"


def entity_id(entity_key: str, suffix: str) -> str:
    return f"{entity_key}-{suffix}"


def pattern_id(pattern_type: str, entity_key: str, index: Any) -> dict:
    return {"type": pattern_type, "entity": entity_key, "index": index}
