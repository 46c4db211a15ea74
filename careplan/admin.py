from django.contrib import admin
from .models import CarePlan, Progress


@admin.register(CarePlan)
class CarePlanAdmin(admin.ModelAdmin):
    list_display = ['user', 'created_at', 'last_reminder_sent']
    list_filter = ['created_at']
    search_fields = ['user__username', 'user__email']
    readonly_fields = ['created_at', 'survey_data', 'care_plan']

    def has_add_permission(self, request):
        return False  # plans only come from the survey


@admin.register(Progress)
class ProgressAdmin(admin.ModelAdmin):
    list_display = ['user', 'step', 'title', 'completed']
    list_filter = ['completed']
    search_fields = ['user__username', 'title']
