from django.contrib import admin
from .models import Vote


@admin.register(Vote)
class VoteAdmin(admin.ModelAdmin):
    list_display = ['type', 'target_name', 'group', 'status', 'vote_progress', 'created_at']
    list_filter = ['type', 'status', 'created_at']
    search_fields = ['target_name', 'group__name', 'created_by__email']
    readonly_fields = ['id', 'voter_ids', 'required_votes', 'total_members', 'created_at', 'resolved_at']
    raw_id_fields = ['group', 'created_by']

    def vote_progress(self, obj):
        return f"{obj.vote_count}/{obj.required_votes}"
    vote_progress.short_description = 'Votes'
