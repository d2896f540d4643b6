"""
Serializers for appointments, diagnoses, medications, prescriptions and
surgeries.  Output objects embed summaries of the people they refer to.
"""
from rest_framework import serializers

from core.models import Appointment, AppointmentStatus, Diagnosis, Medication, Prescription, Surgery
from core.serializers.common import CleanCharField
from core.serializers.patient import DiagnosisSummarySerializer, PatientSummarySerializer
from core.serializers.staff import DoctorSummarySerializer, NurseSummarySerializer


class MedicationSerializer(serializers.ModelSerializer):
    medicationId = serializers.UUIDField(source='id', read_only=True)
    medicationName = serializers.CharField(source='name', read_only=True)

    class Meta:
        model = Medication
        fields = ['medicationId', 'medicationName', 'dosage']


class DiagnosisSerializer(DiagnosisSummarySerializer):
    doctor = DoctorSummarySerializer(read_only=True, allow_null=True)

    class Meta(DiagnosisSummarySerializer.Meta):
        fields = DiagnosisSummarySerializer.Meta.fields + ['doctor']


class AppointmentSerializer(serializers.ModelSerializer):
    appointmentId = serializers.UUIDField(source='id', read_only=True)
    appointmentDate = serializers.DateField(source='appointment_date', read_only=True)
    patient = PatientSummarySerializer(read_only=True, allow_null=True)
    doctor = DoctorSummarySerializer(read_only=True, allow_null=True)
    nurse = NurseSummarySerializer(read_only=True, allow_null=True)

    class Meta:
        model = Appointment
        fields = ['appointmentId', 'appointmentDate', 'reason', 'status', 'patient', 'doctor', 'nurse']


class PrescriptionSerializer(serializers.ModelSerializer):
    prescriptionId = serializers.UUIDField(source='id', read_only=True)
    startDate = serializers.DateField(source='start_date', read_only=True)
    endDate = serializers.DateField(source='end_date', read_only=True, allow_null=True)
    patient = PatientSummarySerializer(read_only=True, allow_null=True)
    doctor = DoctorSummarySerializer(read_only=True, allow_null=True)
    medication = MedicationSerializer(read_only=True, allow_null=True)

    class Meta:
        model = Prescription
        fields = ['prescriptionId', 'startDate', 'endDate', 'patient', 'doctor', 'medication']


class SurgerySerializer(serializers.ModelSerializer):
    surgeryId = serializers.UUIDField(source='id', read_only=True)
    surgeryDate = serializers.DateField(source='surgery_date', read_only=True)
    patient = PatientSummarySerializer(read_only=True, allow_null=True)
    doctor = DoctorSummarySerializer(read_only=True, allow_null=True)

    class Meta:
        model = Surgery
        fields = ['surgeryId', 'surgeryDate', 'description', 'patient', 'doctor']


class AppointmentWriteSerializer(serializers.Serializer):
    appointmentDate = serializers.DateField()
    reason = CleanCharField(required=False, allow_blank=True, default='')
    status = serializers.ChoiceField(choices=AppointmentStatus.choices, required=False, allow_null=True)
    patientId = serializers.UUIDField(required=False, allow_null=True)
    doctorId = serializers.UUIDField(required=False, allow_null=True)
    nurseId = serializers.UUIDField(required=False, allow_null=True)


class DiagnosisWriteSerializer(serializers.Serializer):
    diagnosisDate = serializers.DateField()
    description = CleanCharField(required=False, allow_blank=True, default='')
    doctorId = serializers.UUIDField(required=False, allow_null=True)


class MedicationWriteSerializer(serializers.Serializer):
    medicationName = CleanCharField(max_length=255)
    dosage = CleanCharField(max_length=255, required=False, allow_blank=True, default='')

    def validate_medicationName(self, v):
        if not v:
            raise serializers.ValidationError('Medication name is required')
        return v


class PrescriptionWriteSerializer(serializers.Serializer):
    startDate = serializers.DateField()
    endDate = serializers.DateField(required=False, allow_null=True)
    patientId = serializers.UUIDField(required=False, allow_null=True)
    doctorId = serializers.UUIDField(required=False, allow_null=True)
    medicationId = serializers.UUIDField(required=False, allow_null=True)

    def validate(self, attrs):
        end = attrs.get('endDate')
        if end and end < attrs['startDate']:
            raise serializers.ValidationError({'endDate': 'End date must not be before start date'})
        return attrs


class SurgeryWriteSerializer(serializers.Serializer):
    surgeryDate = serializers.DateField()
    description = CleanCharField(required=False, allow_blank=True, default='')
    patientId = serializers.UUIDField(required=False, allow_null=True)
    doctorId = serializers.UUIDField(required=False, allow_null=True)


class DateRangeQuerySerializer(serializers.Serializer):
    startDate = serializers.DateField()
    endDate = serializers.DateField()
