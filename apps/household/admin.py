from django.contrib import admin
from .models import Task, Routine, Expense, Note


@admin.register(Task)
class TaskAdmin(admin.ModelAdmin):
    list_display = ['title', 'group', 'is_completed', 'created_by', 'created_at']
    list_filter = ['is_completed', 'created_at']
    search_fields = ['title', 'group__name']
    raw_id_fields = ['group', 'created_by']


@admin.register(Routine)
class RoutineAdmin(admin.ModelAdmin):
    list_display = ['title', 'group', 'frequency', 'assigned_to']
    list_filter = ['frequency']
    search_fields = ['title', 'group__name']
    raw_id_fields = ['group', 'assigned_to', 'created_by']


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    list_display = ['description', 'group', 'amount', 'category', 'date']
    list_filter = ['category', 'date']
    search_fields = ['description', 'group__name']
    raw_id_fields = ['group', 'created_by']
    date_hierarchy = 'date'


@admin.register(Note)
class NoteAdmin(admin.ModelAdmin):
    list_display = ['content', 'group', 'author_name', 'color', 'created_at']
    list_filter = ['color', 'created_at']
    search_fields = ['content', 'author_name', 'group__name']
    raw_id_fields = ['group', 'created_by']
