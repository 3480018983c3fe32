from .callbacks_details import register_detail_callbacks
from .callbacks_notifications import register_notification_callbacks
from .callbacks_records import register_records_callbacks
from .callbacks_session import register_session_callbacks

__all__ = [
    "register_detail_callbacks",
    "register_notification_callbacks",
    "register_records_callbacks",
    "register_session_callbacks",
]
