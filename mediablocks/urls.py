from django.urls import path

from mediablocks.views import block_view

urlpatterns = [
    path("<int:block_id>/", block_view, name="mediablocks_block"),
]
