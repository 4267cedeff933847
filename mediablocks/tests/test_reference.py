from unittest import mock

from django.test import TestCase

from mediablocks.models import Media
from mediablocks.reference import MediaReference


class TestMediaReference(TestCase):
    def setUp(self):
        self.media = Media(id=42, title="Test media")

    def test_from_setting(self):
        self.assertEqual(MediaReference.from_setting(None), MediaReference.empty())
        self.assertEqual(MediaReference.from_setting(42), MediaReference.unresolved(42))
        self.assertEqual(
            MediaReference.from_setting(self.media), MediaReference.resolved(self.media)
        )

    def test_from_setting_ignores_other_values(self):
        for value in [False, True, "42", 4.2, {"id": 42}]:
            with self.subTest(value=value):
                self.assertTrue(MediaReference.from_setting(value).is_empty)

    def test_resolve(self):
        manager = mock.Mock()
        manager.filter.return_value.first.return_value = self.media

        reference = MediaReference.unresolved(42).resolve(manager)

        self.assertTrue(reference.is_resolved)
        self.assertIs(reference.media, self.media)
        self.assertEqual(reference.media_id, 42)
        manager.filter.assert_called_once_with(pk=42)

    def test_resolve_missing(self):
        manager = mock.Mock()
        manager.filter.return_value.first.return_value = None

        self.assertTrue(MediaReference.unresolved(42).resolve(manager).is_empty)

    def test_resolve_other_states(self):
        manager = mock.Mock()
        resolved = MediaReference.resolved(self.media)

        self.assertIs(resolved.resolve(manager), resolved)
        self.assertTrue(MediaReference.empty().resolve(manager).is_empty)
        manager.filter.assert_not_called()

    def test_to_python(self):
        self.assertIsNone(MediaReference.empty().to_python())
        self.assertEqual(MediaReference.unresolved(42).to_python(), 42)
        self.assertIs(MediaReference.resolved(self.media).to_python(), self.media)

    def test_get_prep_value(self):
        self.assertIsNone(MediaReference.empty().get_prep_value())
        self.assertIsNone(MediaReference.unresolved(42).get_prep_value())
        self.assertEqual(MediaReference.resolved(self.media).get_prep_value(), 42)

    def test_repr(self):
        self.assertEqual(repr(MediaReference.empty()), "<MediaReference: empty>")
        self.assertEqual(
            repr(MediaReference.unresolved(42)), "<MediaReference: unresolved 42>"
        )
        self.assertEqual(
            repr(MediaReference.resolved(self.media)),
            "<MediaReference: resolved <Media: Test media>>",
        )
