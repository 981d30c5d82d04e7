from django.apps import AppConfig


class HouseholdConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.household'
    label = 'household'
