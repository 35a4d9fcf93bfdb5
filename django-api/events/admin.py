from django.contrib import admin

from events.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "location", "start_date", "end_date", "created_at"]
    search_fields = ["name", "location"]
    ordering = ["created_at"]
