"""
Admin configuration for the users app.

This module unregisters the default `User` admin and re-registers it with
an inline profile form so the admin flag and Stripe customer id are
editable via the Django admin.
"""
from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.models import User

from .models import UserProfile


class UserProfileInline(admin.StackedInline):
    model = UserProfile
    can_delete = False


class UserAdmin(BaseUserAdmin):
    inlines = [UserProfileInline]
    list_display = ("username", "email", "is_active", "date_joined")


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ("user", "is_admin", "stripe_id", "created_at")
    list_filter = ("is_admin",)
    search_fields = ("user__username", "user__email", "stripe_id")
    actions = ["make_admin"]

    @admin.action(description="Grant wiki admin rights")
    def make_admin(self, request, queryset):
        for profile in queryset:
            profile.make_admin()


admin.site.unregister(User)
admin.site.register(User, UserAdmin)
