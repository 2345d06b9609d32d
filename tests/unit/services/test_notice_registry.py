"""Unit tests for NoticeRegistry."""

import unittest

from notices.enums import NoticeType
from notices.schemas.notice import NoticeDefaults, NoticeRecord
from notices.services.notice_registry import NoticeRegistry


class TestNoticeRegistry(unittest.TestCase):
    """Tests for NoticeRegistry."""

    def setUp(self):
        self.registry = NoticeRegistry()

    def test_register_merges_defaults_and_keys_by_storage_key(self):
        notice = self.registry.register(
            {"id": "update-v2"}, NoticeDefaults(type="warning", dismissible=True)
        )

        self.assertEqual(notice.type, NoticeType.WARNING)
        self.assertTrue(notice.dismissible)
        self.assertIs(self.registry.get("notice-update-v2"), notice)

    def test_register_same_id_replaces(self):
        self.registry.register(NoticeRecord(id="a", message="first"))
        self.registry.register(NoticeRecord(id="a", message="second"))

        notices = self.registry.all()
        self.assertEqual(len(notices), 1)
        self.assertEqual(notices[0].message, "second")

    def test_is_required(self):
        self.registry.register(NoticeRecord(id="needs-plugin", required=True))
        self.registry.register(NoticeRecord(id="optional"))

        self.assertTrue(self.registry.is_required("notice-needs-plugin"))
        self.assertFalse(self.registry.is_required("notice-optional"))
        self.assertFalse(self.registry.is_required("notice-unknown"))

    def test_unregister(self):
        self.registry.register(NoticeRecord(id="a"))

        self.assertTrue(self.registry.unregister("a"))
        self.assertFalse(self.registry.unregister("a"))
        self.assertIsNone(self.registry.get("notice-a"))

    def test_all_preserves_registration_order(self):
        for notice_id in ("first", "second", "third"):
            self.registry.register(NoticeRecord(id=notice_id))

        self.assertEqual(
            [notice.id for notice in self.registry.all()],
            ["first", "second", "third"],
        )

    def test_clear(self):
        self.registry.register(NoticeRecord(id="a"))
        self.registry.clear()
        self.assertEqual(self.registry.all(), [])


if __name__ == "__main__":
    unittest.main()
