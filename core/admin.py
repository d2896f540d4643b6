"""
Django admin registrations for the core models, reachable under
``/admin/`` for inspecting and correcting data during development.
"""

from django.contrib import admin

from .models import (
    Appointment,
    Diagnosis,
    Doctor,
    Hospital,
    Medication,
    Nurse,
    Patient,
    Prescription,
    Surgery,
    User,
    Ward,
)


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ('username', 'role', 'is_staff', 'is_superuser')
    list_filter = ('role',)
    search_fields = ('username', 'first_name', 'last_name')


@admin.register(Hospital)
class HospitalAdmin(admin.ModelAdmin):
    list_display = ('name', 'address', 'city')
    list_filter = ('city',)
    search_fields = ('name', 'city')
    filter_horizontal = ('wards',)


@admin.register(Ward)
class WardAdmin(admin.ModelAdmin):
    list_display = ('id', 'type', 'max_capacity')
    list_filter = ('type',)


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ('name', 'speciality', 'ward', 'hospital')
    list_filter = ('speciality', 'hospital')
    search_fields = ('name',)


@admin.register(Nurse)
class NurseAdmin(admin.ModelAdmin):
    list_display = ('name', 'speciality', 'ward', 'hospital')
    list_filter = ('speciality', 'hospital')
    search_fields = ('name',)


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('name', 'date_of_birth', 'gender', 'ward', 'hospital')
    list_filter = ('hospital',)
    search_fields = ('name',)


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ('appointment_date', 'status', 'patient', 'doctor', 'nurse')
    list_filter = ('status',)
    search_fields = ('patient__name', 'doctor__name', 'reason')


@admin.register(Diagnosis)
class DiagnosisAdmin(admin.ModelAdmin):
    list_display = ('diagnosis_date', 'doctor', 'description')
    search_fields = ('description', 'doctor__name')


@admin.register(Medication)
class MedicationAdmin(admin.ModelAdmin):
    list_display = ('name', 'dosage')
    search_fields = ('name',)


@admin.register(Prescription)
class PrescriptionAdmin(admin.ModelAdmin):
    list_display = ('start_date', 'end_date', 'patient', 'doctor', 'medication')
    search_fields = ('patient__name', 'medication__name')


@admin.register(Surgery)
class SurgeryAdmin(admin.ModelAdmin):
    list_display = ('surgery_date', 'patient', 'doctor')
    search_fields = ('patient__name', 'description')
