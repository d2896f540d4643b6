from rest_framework import serializers

from core.models import Diagnosis, Patient
from core.serializers.common import CleanCharField
from core.serializers.hospital import HospitalSummarySerializer, WardSummarySerializer


class DiagnosisSummarySerializer(serializers.ModelSerializer):
    diagnosisId = serializers.UUIDField(source='id', read_only=True)
    diagnosisDate = serializers.DateField(source='diagnosis_date', read_only=True)

    class Meta:
        model = Diagnosis
        fields = ['diagnosisId', 'diagnosisDate', 'description']


class PatientSummarySerializer(serializers.ModelSerializer):
    patientId = serializers.UUIDField(source='id', read_only=True)
    patientName = serializers.CharField(source='name', read_only=True)
    dateOfBirth = serializers.DateField(source='date_of_birth', read_only=True)

    class Meta:
        model = Patient
        fields = ['patientId', 'patientName', 'dateOfBirth', 'gender']


class PatientSerializer(PatientSummarySerializer):
    ward = WardSummarySerializer(read_only=True, allow_null=True)
    hospital = HospitalSummarySerializer(read_only=True, allow_null=True)
    diagnoses = DiagnosisSummarySerializer(many=True, read_only=True)

    class Meta(PatientSummarySerializer.Meta):
        fields = PatientSummarySerializer.Meta.fields + ['ward', 'hospital', 'diagnoses']


class PatientWriteSerializer(serializers.Serializer):
    patientName = CleanCharField(max_length=255)
    dateOfBirth = serializers.DateField()
    gender = CleanCharField(max_length=20, required=False, allow_blank=True, default='')
    wardId = serializers.UUIDField(required=False, allow_null=True)
    hospitalId = serializers.UUIDField(required=False, allow_null=True)
    diagnosisIds = serializers.ListField(child=serializers.UUIDField(), required=False, allow_null=True)

    def validate_patientName(self, v):
        if not v:
            raise serializers.ValidationError('Patient name is required')
        return v
