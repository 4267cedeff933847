from django.db import models


class MediaReference:
    """
    The value held by a block's ``mediaId`` setting. It is stored as a bare
    integer id (or nothing), and held in memory as the media instance once the
    block has been loaded.
    """

    EMPTY = "empty"
    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"

    def __init__(self, state, media_id=None, media=None):
        self.state = state
        self.media_id = media_id
        self.media = media

    def __repr__(self):
        if self.state == self.RESOLVED:
            return "<MediaReference: resolved %r>" % self.media
        if self.state == self.UNRESOLVED:
            return "<MediaReference: unresolved %d>" % self.media_id
        return "<MediaReference: empty>"

    def __eq__(self, other):
        return (
            isinstance(other, MediaReference)
            and self.state == other.state
            and self.media_id == other.media_id
            and self.media == other.media
        )

    @classmethod
    def empty(cls):
        return cls(cls.EMPTY)

    @classmethod
    def unresolved(cls, media_id):
        return cls(cls.UNRESOLVED, media_id=media_id)

    @classmethod
    def resolved(cls, media):
        return cls(cls.RESOLVED, media_id=media.pk, media=media)

    @classmethod
    def from_setting(cls, value):
        # bool is an int subclass but never a valid id
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.unresolved(value)
        if isinstance(value, models.Model):
            return cls.resolved(value)
        return cls.empty()

    @property
    def is_empty(self):
        return self.state == self.EMPTY

    @property
    def is_resolved(self):
        return self.state == self.RESOLVED

    def resolve(self, manager):
        """
        Look up an unresolved reference through ``manager``. A missing object
        gives an empty reference; other states are returned unchanged.
        """
        if self.state != self.UNRESOLVED:
            return self

        media = manager.filter(pk=self.media_id).first()
        if media is None:
            return self.empty()
        return self.resolved(media)

    def to_python(self):
        """Return the in-memory setting value."""
        if self.is_resolved:
            return self.media
        if self.state == self.UNRESOLVED:
            return self.media_id
        return None

    def get_prep_value(self):
        """Return the value to store: only resolved references keep an id."""
        if self.is_resolved:
            return self.media.pk
        return None
