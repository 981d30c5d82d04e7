from rest_framework import serializers
from .models import Activity


class ActivitySerializer(serializers.ModelSerializer):
    """Feed entry with its rendered message."""

    message = serializers.SerializerMethodField()

    class Meta:
        model = Activity
        fields = ['id', 'group', 'type', 'user', 'user_name', 'metadata', 'timestamp', 'message']
        read_only_fields = fields

    def get_message(self, obj):
        return obj.describe()


class ActivityFilterSerializer(serializers.Serializer):
    """Query parameters for the activity feed."""

    group = serializers.UUIDField(required=True)
    limit = serializers.IntegerField(required=False, min_value=1, max_value=200, default=50)
