from __future__ import annotations

import logging

from django.db import transaction

from core.models import Doctor, Patient, Surgery
from core.services.common import delete_or_404, get_optional, get_or_404, require

logger = logging.getLogger(__name__)


def list_surgeries():
    return Surgery.objects.select_related('patient', 'doctor').order_by('-surgery_date')


def get_surgery(surgery_id) -> Surgery:
    return get_or_404(Surgery, surgery_id)


def surgeries_by_patient(patient_id):
    require(patient_id, 'Patient ID')
    return list_surgeries().filter(patient_id=patient_id)


@transaction.atomic
def create_surgery(*, surgery_date, description='', patient_id=None, doctor_id=None) -> Surgery:
    surgery = Surgery.objects.create(
        surgery_date=surgery_date,
        description=description or '',
        patient=get_optional(Patient, patient_id),
        doctor=get_optional(Doctor, doctor_id),
    )
    logger.info('Created surgery %s', surgery.pk)
    return surgery


@transaction.atomic
def update_surgery(surgery_id, *, surgery_date, description='', patient_id=None, doctor_id=None) -> Surgery:
    surgery = get_surgery(surgery_id)
    surgery.surgery_date = surgery_date
    surgery.description = description or ''
    if patient_id is not None:
        surgery.patient = get_or_404(Patient, patient_id)
    if doctor_id is not None:
        surgery.doctor = get_or_404(Doctor, doctor_id)
    surgery.save()
    return surgery


def delete_surgery(surgery_id) -> None:
    delete_or_404(Surgery, surgery_id)
    logger.info('Deleted surgery %s', surgery_id)
