# results/admin.py
from django.contrib import admin
from .models import Result

@admin.register(Result)
class ResultAdmin(admin.ModelAdmin):
    list_display = ('runner_name', 'house', 'time', 'event', 'created_at')
    list_filter = ('event', 'house')
    search_fields = ('runner_name',)
