from django import template
from django.utils.safestring import mark_safe

from mediablocks.blocks import render_block as render_block_response
from mediablocks.formats import get_media_pool

register = template.Library()


@register.simple_tag
def render_block(block, **extra_settings):
    """
    Render a block through its block service, e.g.::

        {% render_block block title="Gallery" %}
    """
    if not block or not block.enabled:
        return ""

    response = render_block_response(block, extra_settings=extra_settings)
    return mark_safe(response.content.decode(response.charset))


@register.simple_tag
def media_format_attrs(media, format_name, pool=None):
    """
    Return the HTML attributes for displaying ``media`` in the named format.
    Unknown formats give the attributes of the original file.

    Formats are looked up in ``pool``, or in the pool configured by
    ``MEDIABLOCKS_CONTEXTS`` when none is given::

        {% media_format_attrs media "large" pool=media_pool as attrs %}
    """
    if pool is None:
        pool = get_media_pool()

    try:
        format = pool.get_format(media.context, format_name)
    except KeyError:
        return {"src": media.url, "alt": media.title}

    return format.html_attributes(media)
