from rest_framework import serializers

from .models import TEXT_FIELDS


class RemoteStarshipSerializer(serializers.Serializer):
    """
    Normalizes one SWAPI starship. Missing or null text fields become "".
    """
    name = serializers.CharField(required=False, allow_null=True, allow_blank=True, trim_whitespace=False)
    model = serializers.CharField(required=False, allow_null=True, allow_blank=True, trim_whitespace=False)
    manufacturer = serializers.CharField(required=False, allow_null=True, allow_blank=True, trim_whitespace=False)
    starship_class = serializers.CharField(required=False, allow_null=True, allow_blank=True, trim_whitespace=False)
    crew = serializers.CharField(required=False, allow_null=True, allow_blank=True, trim_whitespace=False)
    passengers = serializers.CharField(required=False, allow_null=True, allow_blank=True, trim_whitespace=False)
    url = serializers.CharField(source='source_url', required=False, allow_null=True, allow_blank=True)

    def validate(self, data):
        normalized = {field: data.get(field) or '' for field in TEXT_FIELDS}
        normalized['source_url'] = data.get('source_url') or None
        return normalized


class RemotePageSerializer(serializers.Serializer):
    """
    One page of a SWAPI collection: ``{"next": url|null, "results": [...]}``
    """
    next = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    results = RemoteStarshipSerializer(many=True, required=False, allow_null=True)

    def validate(self, data):
        return {
            'next': data.get('next') or None,
            'results': [record for record in data.get('results') or [] if record],
        }
