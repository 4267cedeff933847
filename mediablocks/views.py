from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_safe

from mediablocks.blocks import render_block
from mediablocks.models import Block


@require_safe
def block_view(request, block_id):
    block = get_object_or_404(Block, id=block_id, enabled=True)
    return render_block(block)
