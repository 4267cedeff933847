from django.core.exceptions import ImproperlyConfigured
from django.test import TestCase, override_settings

from mediablocks import get_media_model, get_media_model_string
from mediablocks.blocks import MEDIA_BLOCK_TYPE
from mediablocks.models import Block, Media
from mediablocks.test.utils import get_test_image_file


class TestMedia(TestCase):
    def test_save_image(self):
        media = Media.objects.create(title="Test media", file=get_test_image_file())

        self.assertEqual(media.context, "default")
        self.assertEqual(media.content_type, "image/png")
        self.assertTrue(media.is_image)
        self.assertEqual((media.width, media.height), (640, 480))
        self.assertTrue(media.file.name.startswith("media/default/test"))
        self.assertEqual(media.url, media.file.url)
        self.assertEqual(str(media), "Test media")

    @override_settings(MEDIABLOCKS_DEFAULT_CONTEXT="news")
    def test_default_context_from_settings(self):
        media = Media.objects.create(title="Test media", file=get_test_image_file())

        self.assertEqual(media.context, "news")
        self.assertTrue(media.file.name.startswith("media/news/"))

    def test_save_other_file(self):
        media = Media.objects.create(
            title="Report", file=get_test_image_file("report.pdf")
        )

        self.assertEqual(media.content_type, "application/pdf")
        self.assertFalse(media.is_image)
        self.assertIsNone(media.width)

    def test_url_without_file(self):
        self.assertEqual(Media(title="Empty").url, "")


class TestGetMediaModel(TestCase):
    def test_default(self):
        self.assertEqual(get_media_model_string(), "mediablocks.Media")
        self.assertIs(get_media_model(), Media)

    @override_settings(MEDIABLOCKS_MEDIA_MODEL="mediablocks")
    def test_invalid_string(self):
        with self.assertRaises(ImproperlyConfigured):
            get_media_model()

    @override_settings(MEDIABLOCKS_MEDIA_MODEL="mediablocks.Unknown")
    def test_unknown_model(self):
        with self.assertRaises(ImproperlyConfigured):
            get_media_model()


class TestBlock(TestCase):
    def test_settings(self):
        block = Block(type=MEDIA_BLOCK_TYPE, settings={"title": "Hello"})

        self.assertEqual(block.get_setting("title"), "Hello")
        self.assertIsNone(block.get_setting("format"))
        self.assertFalse(block.get_setting("format", False))

        block.set_setting("format", "small")
        self.assertEqual(block.settings, {"title": "Hello", "format": "small"})

    def test_str(self):
        self.assertEqual(str(Block(type=MEDIA_BLOCK_TYPE, name="Hero")), "Hero")
        self.assertEqual(str(Block(type=MEDIA_BLOCK_TYPE)), MEDIA_BLOCK_TYPE)


class TestBlockPersistence(TestCase):
    def setUp(self):
        self.media = Media.objects.create(
            title="Test media", file=get_test_image_file()
        )

    def test_create_with_media_id(self):
        block = Block.objects.create(
            type=MEDIA_BLOCK_TYPE, settings={"mediaId": self.media.id}
        )
        block.refresh_from_db()

        self.assertEqual(block.get_setting("mediaId"), self.media.id)

    def test_create_with_media_object(self):
        block = Block.objects.create(
            type=MEDIA_BLOCK_TYPE, settings={"mediaId": self.media}
        )
        block.refresh_from_db()

        self.assertEqual(block.get_setting("mediaId"), self.media.id)

    def test_update_with_media_object(self):
        block = Block.objects.create(type=MEDIA_BLOCK_TYPE, settings={})
        block.set_setting("mediaId", self.media)
        block.save()
        block.refresh_from_db()

        self.assertEqual(block.get_setting("mediaId"), self.media.id)

    def test_missing_media_is_cleared(self):
        block = Block.objects.create(type=MEDIA_BLOCK_TYPE, settings={"mediaId": 9999})
        block.refresh_from_db()

        self.assertIsNone(block.get_setting("mediaId"))

    def test_unknown_block_type_is_stored_as_is(self):
        block = Block.objects.create(type="unknown", settings={"mediaId": 9999})
        block.refresh_from_db()

        self.assertEqual(block.get_setting("mediaId"), 9999)
