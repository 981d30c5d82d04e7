from rest_framework import serializers
from apps.accounts.serializers import UserMinimalSerializer
from .models import Vote, VoteType


class VoteSerializer(serializers.ModelSerializer):
    """Vote as shown to group members."""

    created_by = UserMinimalSerializer(read_only=True)
    votes = serializers.ListField(source='voter_ids', child=serializers.CharField(), read_only=True)
    vote_count = serializers.IntegerField(read_only=True)
    has_voted = serializers.SerializerMethodField()
    is_creator = serializers.SerializerMethodField()

    class Meta:
        model = Vote
        fields = [
            'id',
            'group',
            'type',
            'target_id',
            'target_name',
            'created_by',
            'votes',
            'vote_count',
            'required_votes',
            'total_members',
            'status',
            'execution_error',
            'has_voted',
            'is_creator',
            'created_at',
            'resolved_at',
        ]
        read_only_fields = fields

    def get_has_voted(self, obj):
        request = self.context.get('request')
        if request and request.user.is_authenticated:
            return obj.has_voted(request.user.id)
        return False

    def get_is_creator(self, obj):
        request = self.context.get('request')
        if request and request.user.is_authenticated:
            return obj.is_creator(request.user.id)
        return False


class VoteFilterSerializer(serializers.Serializer):
    """Query parameters for listing pending votes."""

    group = serializers.UUIDField(required=True)
    type = serializers.ChoiceField(choices=VoteType.choices, required=False)
