"""Serializers for the persisted event graph.

Attendees are stored once in their own table and referenced by id from
events, so an attendee confirmed for several events is written a single
time and comes back as a single object.
"""

from rest_framework import serializers

from events.domain import Category

GRAPH_VERSION = 1


class AttendeeRecordSerializer(serializers.Serializer):
    """Serializer for one entry of the attendee table."""

    id = serializers.UUIDField()
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    email = serializers.CharField(allow_blank=True, trim_whitespace=False)
    city = serializers.CharField(allow_blank=True, trim_whitespace=False)
    confirmed_event_ids = serializers.ListField(child=serializers.UUIDField())


class EventRecordSerializer(serializers.Serializer):
    """Serializer for one event, with attendees referenced by id."""

    id = serializers.UUIDField()
    name = serializers.CharField(allow_blank=True, trim_whitespace=False)
    address = serializers.CharField(allow_blank=True, trim_whitespace=False)
    category = serializers.ChoiceField(choices=[c.value for c in Category])
    start_time = serializers.DateTimeField()
    description = serializers.CharField(allow_blank=True, trim_whitespace=False)
    attendee_ids = serializers.ListField(child=serializers.UUIDField())


class EventGraphSerializer(serializers.Serializer):
    """Serializer for the whole stored document."""

    version = serializers.IntegerField()
    attendees = AttendeeRecordSerializer(many=True)
    events = EventRecordSerializer(many=True)

    def validate_version(self, value: int) -> int:
        if value != GRAPH_VERSION:
            raise serializers.ValidationError(f"Unsupported version {value}")
        return value
