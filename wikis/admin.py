from django.contrib import admin

from .models import Wiki


@admin.register(Wiki)
class WikiAdmin(admin.ModelAdmin):
    list_display = ("title", "user", "private", "created_at", "updated_at")
    list_filter = ("private",)
    search_fields = ("title", "body", "user__username")
    ordering = ("-created_at",)
