from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from pressroom.posts.models import Post


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ("title", "user", "is_draft", "published_at", "display_state")
    list_filter = ("is_draft", "published_at")
    search_fields = ("title", "content")
    raw_id_fields = ("user",)
    date_hierarchy = "published_at"
    list_select_related = ("user",)

    @admin.display(description=_("State"))
    def display_state(self, obj: Post) -> str:
        return obj.get_state().label
