"""
Database models for the hospital administration backend.

Hospitals own a many-to-many set of wards; staff (doctors, nurses) and
patients may reference a ward and a hospital.  Clinical records
(appointments, diagnoses, prescriptions, surgeries) hang off patients
and doctors.  Every entity is keyed by a random UUID assigned at
creation time.
"""
from __future__ import annotations

import uuid
from django.contrib.auth.models import AbstractUser
from django.db import models


class Role(models.TextChoices):
    ADMIN = 'ADMIN', 'Administrator'
    USER = 'USER', 'User'


class WardType(models.TextChoices):
    CARDIOLOGY = 'CARDIOLOGY', 'Cardiology'
    NEUROLOGY = 'NEUROLOGY', 'Neurology'
    GENERAL_MEDICINE = 'GENERAL_MEDICINE', 'General medicine'
    SURGERY = 'SURGERY', 'Surgery'


class DoctorSpeciality(models.TextChoices):
    CARDIOLOGY = 'CARDIOLOGY', 'Cardiology'
    NEUROLOGY = 'NEUROLOGY', 'Neurology'
    GENERAL_MEDICINE = 'GENERAL_MEDICINE', 'General medicine'
    SURGERY = 'SURGERY', 'Surgery'


class NurseSpeciality(models.TextChoices):
    EMERGENCY = 'EMERGENCY', 'Emergency'
    ICU = 'ICU', 'Intensive care'
    GENERAL_CARE = 'GENERAL_CARE', 'General care'


class AppointmentStatus(models.TextChoices):
    SCHEDULED = 'SCHEDULED', 'Scheduled'
    COMPLETED = 'COMPLETED', 'Completed'
    CANCELLED = 'CANCELLED', 'Cancelled'


class User(AbstractUser):
    """Custom user model carrying an API role.

    ADMIN may manage every resource, USER may read everything and
    register patients and clinical records.
    """
    role = models.CharField(max_length=10, choices=Role.choices, default=Role.USER, db_index=True)

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"


class Ward(models.Model):
    """A ward; the hospitals it belongs to are the reverse of ``Hospital.wards``."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    type = models.CharField(max_length=32, choices=WardType.choices, db_index=True)
    max_capacity = models.PositiveIntegerField(default=0)

    def __str__(self) -> str:
        return f"{self.type} ({self.id})"


class Hospital(models.Model):
    """A hospital and its ward set.

    The association table behind ``wards`` is the only record of which
    wards belong to which hospital; it is replaced wholesale through
    :func:`core.services.hospitals.set_wards`.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    address = models.CharField(max_length=255, blank=True)
    # 按城市查询是常用过滤条件
    city = models.CharField(max_length=120, blank=True, db_index=True)
    wards = models.ManyToManyField(Ward, related_name='hospitals', blank=True)

    def __str__(self) -> str:
        return f"{self.name} ({self.city})"


class Doctor(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    speciality = models.CharField(max_length=32, choices=DoctorSpeciality.choices, db_index=True)
    ward = models.ForeignKey(Ward, null=True, blank=True, on_delete=models.SET_NULL, related_name='doctors')
    hospital = models.ForeignKey(Hospital, null=True, blank=True, on_delete=models.SET_NULL, related_name='doctors')

    def __str__(self) -> str:
        return f"{self.name} ({self.speciality})"


class Nurse(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    speciality = models.CharField(max_length=32, choices=NurseSpeciality.choices, db_index=True)
    ward = models.ForeignKey(Ward, null=True, blank=True, on_delete=models.SET_NULL, related_name='nurses')
    hospital = models.ForeignKey(Hospital, null=True, blank=True, on_delete=models.SET_NULL, related_name='nurses')

    def __str__(self) -> str:
        return f"{self.name} ({self.speciality})"


class Diagnosis(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    diagnosis_date = models.DateField()
    description = models.TextField(blank=True)
    doctor = models.ForeignKey(Doctor, null=True, blank=True, on_delete=models.SET_NULL, related_name='diagnoses')

    class Meta:
        verbose_name_plural = 'diagnoses'

    def __str__(self) -> str:
        return f"Diagnosis {self.diagnosis_date} ({self.id})"


class Patient(models.Model):
    """A patient, optionally placed in a ward of a hospital."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    date_of_birth = models.DateField()
    gender = models.CharField(max_length=20, blank=True)
    ward = models.ForeignKey(Ward, null=True, blank=True, on_delete=models.SET_NULL, related_name='patients')
    hospital = models.ForeignKey(Hospital, null=True, blank=True, on_delete=models.SET_NULL, related_name='patients')
    diagnoses = models.ManyToManyField(Diagnosis, related_name='patients', blank=True)

    def __str__(self) -> str:
        return f"{self.name} ({self.date_of_birth})"


class Appointment(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    # 按日期及日期区间查询，添加索引
    appointment_date = models.DateField(db_index=True)
    reason = models.TextField(blank=True)
    status = models.CharField(
        max_length=16, choices=AppointmentStatus.choices, default=AppointmentStatus.SCHEDULED, db_index=True
    )
    patient = models.ForeignKey(Patient, null=True, blank=True, on_delete=models.SET_NULL, related_name='appointments')
    doctor = models.ForeignKey(Doctor, null=True, blank=True, on_delete=models.SET_NULL, related_name='appointments')
    nurse = models.ForeignKey(Nurse, null=True, blank=True, on_delete=models.SET_NULL, related_name='appointments')

    def __str__(self) -> str:
        return f"Appointment {self.appointment_date} ({self.status})"


class Medication(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    dosage = models.CharField(max_length=255, blank=True)

    def __str__(self) -> str:
        return f"{self.name} {self.dosage}".strip()


class Prescription(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    start_date = models.DateField()
    end_date = models.DateField(null=True, blank=True)
    patient = models.ForeignKey(Patient, null=True, blank=True, on_delete=models.SET_NULL, related_name='prescriptions')
    doctor = models.ForeignKey(Doctor, null=True, blank=True, on_delete=models.SET_NULL, related_name='prescriptions')
    medication = models.ForeignKey(
        Medication, null=True, blank=True, on_delete=models.SET_NULL, related_name='prescriptions'
    )

    def __str__(self) -> str:
        return f"Prescription {self.start_date} ({self.id})"


class Surgery(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    surgery_date = models.DateField()
    description = models.TextField(blank=True)
    patient = models.ForeignKey(Patient, null=True, blank=True, on_delete=models.SET_NULL, related_name='surgeries')
    doctor = models.ForeignKey(Doctor, null=True, blank=True, on_delete=models.SET_NULL, related_name='surgeries')

    class Meta:
        verbose_name_plural = 'surgeries'

    def __str__(self) -> str:
        return f"Surgery {self.surgery_date} ({self.id})"
