from .base import *  # NOQA: F403
from .media_block import MEDIA_BLOCK_TYPE, MediaBlockService  # NOQA: F401
from .registry import BlockServiceRegistry, registry, render_block  # NOQA: F401
