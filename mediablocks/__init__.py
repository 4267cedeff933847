from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from mediablocks.utils.version import get_version

# major.minor.patch.release.number
# release must be one of alpha, beta, rc, or final
VERSION = (1, 0, 0, "final", 0)

__version__ = get_version(VERSION)


def get_media_model_string():
    """
    Get the dotted ``app.Model`` name for the media model as a string.
    Useful for plugins that need to refer to the media model, such as in
    foreign keys, but the model itself is not required.
    """
    return getattr(settings, "MEDIABLOCKS_MEDIA_MODEL", "mediablocks.Media")


def get_media_model():
    """
    Get the media model from the ``MEDIABLOCKS_MEDIA_MODEL`` setting.
    Defaults to the standard ``mediablocks.models.Media`` model
    if no custom model is defined.
    """
    from django.apps import apps

    model_string = get_media_model_string()
    try:
        return apps.get_model(model_string, require_ready=False)
    except ValueError:
        raise ImproperlyConfigured(
            "MEDIABLOCKS_MEDIA_MODEL must be of the form 'app_label.model_name'"
        )
    except LookupError:
        raise ImproperlyConfigured(
            "MEDIABLOCKS_MEDIA_MODEL refers to model '%s' that has not been installed"
            % model_string
        )
