from rest_framework import serializers

from core.models import Doctor, DoctorSpeciality, Nurse, NurseSpeciality
from core.serializers.common import CleanCharField
from core.serializers.hospital import HospitalSummarySerializer, WardSummarySerializer


class DoctorSummarySerializer(serializers.ModelSerializer):
    doctorId = serializers.UUIDField(source='id', read_only=True)
    doctorName = serializers.CharField(source='name', read_only=True)

    class Meta:
        model = Doctor
        fields = ['doctorId', 'doctorName', 'speciality']


class DoctorSerializer(DoctorSummarySerializer):
    ward = WardSummarySerializer(read_only=True, allow_null=True)
    hospital = HospitalSummarySerializer(read_only=True, allow_null=True)

    class Meta(DoctorSummarySerializer.Meta):
        fields = DoctorSummarySerializer.Meta.fields + ['ward', 'hospital']


class NurseSummarySerializer(serializers.ModelSerializer):
    nurseId = serializers.UUIDField(source='id', read_only=True)
    nurseName = serializers.CharField(source='name', read_only=True)

    class Meta:
        model = Nurse
        fields = ['nurseId', 'nurseName', 'speciality']


class NurseSerializer(NurseSummarySerializer):
    ward = WardSummarySerializer(read_only=True, allow_null=True)
    hospital = HospitalSummarySerializer(read_only=True, allow_null=True)

    class Meta(NurseSummarySerializer.Meta):
        fields = NurseSummarySerializer.Meta.fields + ['ward', 'hospital']


class DoctorWriteSerializer(serializers.Serializer):
    doctorName = CleanCharField(max_length=255)
    speciality = serializers.ChoiceField(choices=DoctorSpeciality.choices)
    wardId = serializers.UUIDField(required=False, allow_null=True)
    hospitalId = serializers.UUIDField(required=False, allow_null=True)

    def validate_doctorName(self, v):
        if not v:
            raise serializers.ValidationError('Doctor name is required')
        return v


class NurseWriteSerializer(serializers.Serializer):
    nurseName = CleanCharField(max_length=255)
    speciality = serializers.ChoiceField(choices=NurseSpeciality.choices)
    wardId = serializers.UUIDField(required=False, allow_null=True)
    hospitalId = serializers.UUIDField(required=False, allow_null=True)

    def validate_nurseName(self, v):
        if not v:
            raise serializers.ValidationError('Nurse name is required')
        return v
