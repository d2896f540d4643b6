from rest_framework import serializers

from core.models import Hospital, Ward, WardType
from core.serializers.common import CleanCharField


class WardSummarySerializer(serializers.ModelSerializer):
    wardId = serializers.UUIDField(source='id', read_only=True)
    maxCapacity = serializers.IntegerField(source='max_capacity', read_only=True)

    class Meta:
        model = Ward
        fields = ['wardId', 'type', 'maxCapacity']


class HospitalSummarySerializer(serializers.ModelSerializer):
    hospitalId = serializers.UUIDField(source='id', read_only=True)
    hospitalName = serializers.CharField(source='name', read_only=True)

    class Meta:
        model = Hospital
        fields = ['hospitalId', 'hospitalName', 'address', 'city']


class HospitalSerializer(HospitalSummarySerializer):
    wards = WardSummarySerializer(many=True, read_only=True)

    class Meta(HospitalSummarySerializer.Meta):
        fields = HospitalSummarySerializer.Meta.fields + ['wards']


class WardSerializer(WardSummarySerializer):
    hospitals = HospitalSummarySerializer(many=True, read_only=True)

    class Meta(WardSummarySerializer.Meta):
        fields = WardSummarySerializer.Meta.fields + ['hospitals']


class HospitalWriteSerializer(serializers.Serializer):
    hospitalName = CleanCharField(max_length=255)
    address = CleanCharField(max_length=255, required=False, allow_blank=True, default='')
    city = CleanCharField(max_length=120, required=False, allow_blank=True, default='')
    wardIds = serializers.ListField(child=serializers.UUIDField(), required=False, allow_null=True)

    def validate_hospitalName(self, v):
        if not v:
            raise serializers.ValidationError('Hospital name is required')
        return v


class WardWriteSerializer(serializers.Serializer):
    type = serializers.ChoiceField(choices=WardType.choices)
    maxCapacity = serializers.IntegerField(min_value=0)
