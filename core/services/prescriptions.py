from __future__ import annotations

import logging

from django.db import transaction

from core.models import Doctor, Medication, Patient, Prescription
from core.services.common import delete_or_404, get_optional, get_or_404, require

logger = logging.getLogger(__name__)


def list_prescriptions():
    return Prescription.objects.select_related('patient', 'doctor', 'medication').order_by('-start_date')


def get_prescription(prescription_id) -> Prescription:
    return get_or_404(Prescription, prescription_id)


def prescriptions_by_patient(patient_id):
    require(patient_id, 'Patient ID')
    return list_prescriptions().filter(patient_id=patient_id)


@transaction.atomic
def create_prescription(*, start_date, end_date=None, patient_id=None, doctor_id=None,
                        medication_id=None) -> Prescription:
    prescription = Prescription.objects.create(
        start_date=start_date,
        end_date=end_date,
        patient=get_optional(Patient, patient_id),
        doctor=get_optional(Doctor, doctor_id),
        medication=get_optional(Medication, medication_id),
    )
    logger.info('Created prescription %s', prescription.pk)
    return prescription


@transaction.atomic
def update_prescription(prescription_id, *, start_date, end_date=None, patient_id=None, doctor_id=None,
                        medication_id=None) -> Prescription:
    prescription = get_prescription(prescription_id)
    prescription.start_date = start_date
    prescription.end_date = end_date
    if patient_id is not None:
        prescription.patient = get_or_404(Patient, patient_id)
    if doctor_id is not None:
        prescription.doctor = get_or_404(Doctor, doctor_id)
    if medication_id is not None:
        prescription.medication = get_or_404(Medication, medication_id)
    prescription.save()
    return prescription


def delete_prescription(prescription_id) -> None:
    delete_or_404(Prescription, prescription_id)
    logger.info('Deleted prescription %s', prescription_id)
