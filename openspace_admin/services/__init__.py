from .export_service import export_records_csv, records_frame
from .notification_service import Notification, NotificationInbox
from .session_service import ConsoleSession, ConsoleSessionManager, controller_factory_from_config

__all__ = [
    "export_records_csv",
    "records_frame",
    "Notification",
    "NotificationInbox",
    "ConsoleSession",
    "ConsoleSessionManager",
    "controller_factory_from_config",
]
