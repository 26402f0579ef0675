# core/admin.py
from django.contrib import admin
from .models import Event

@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ('name', 'division', 'age_group', 'distance', 'active', 'created_at')
    list_filter = ('active', 'division', 'distance')
    readonly_fields = ('name', 'created_at')
