import pytest

from openspace_admin.services.notification_service import Notification, NotificationInbox


def _inbox():
    return NotificationInbox(
        [
            Notification(id=1, title="New report", message="m1"),
            Notification(id=2, title="Maintenance", message="m2", is_read=True),
            Notification(id=3, title="New report", message="m3"),
        ]
    )


def test_default_inbox_uses_builtin_notifications():
    inbox = NotificationInbox()
    assert len(inbox.items) == 5
    assert inbox.unread_count == 3


def test_mark_read():
    inbox = _inbox()
    inbox.mark_read(1)
    assert inbox.unread_count == 1
    assert [n.is_read for n in inbox.items] == [True, True, False]


def test_mark_read_unknown_id_is_ignored():
    inbox = _inbox()
    inbox.mark_read(99)
    assert inbox.unread_count == 2


def test_mark_all_read():
    inbox = _inbox()
    inbox.mark_all_read()
    assert inbox.unread_count == 0


def test_items_are_copies():
    inbox = _inbox()
    inbox.items[0].is_read = True
    assert inbox.unread_count == 2


def test_default_inboxes_are_independent():
    a, b = NotificationInbox(), NotificationInbox()
    a.mark_all_read()
    assert b.unread_count == 3


def test_notification_rejects_non_boolean_read_flag():
    with pytest.raises(ValueError, match="is_read"):
        Notification.from_dict({"id": 1, "title": "t", "is_read": "no"})
