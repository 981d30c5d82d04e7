from django.contrib import admin
from apps.activity.models import Activity


@admin.register(Activity)
class ActivityAdmin(admin.ModelAdmin):
    """Read-mostly view of the activity feed."""

    list_display = ['group', 'type', 'user_name', 'timestamp']
    list_filter = ['type', 'timestamp']
    search_fields = ['group__name', 'user_name']
    readonly_fields = ['timestamp']
    date_hierarchy = 'timestamp'
    ordering = ['-timestamp']

    def get_queryset(self, request):
        """Optimize query."""
        qs = super().get_queryset(request)
        return qs.select_related('group', 'user')
