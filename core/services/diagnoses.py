from __future__ import annotations

import logging

from django.db import transaction

from core.models import Diagnosis, Doctor
from core.services.common import delete_or_404, get_optional, get_or_404, require

logger = logging.getLogger(__name__)


def list_diagnoses():
    return Diagnosis.objects.select_related('doctor').order_by('-diagnosis_date')


def get_diagnosis(diagnosis_id) -> Diagnosis:
    return get_or_404(Diagnosis, diagnosis_id)


def diagnoses_by_doctor(doctor_id):
    require(doctor_id, 'Doctor ID')
    return list_diagnoses().filter(doctor_id=doctor_id)


@transaction.atomic
def create_diagnosis(*, diagnosis_date, description='', doctor_id=None) -> Diagnosis:
    diagnosis = Diagnosis.objects.create(
        diagnosis_date=diagnosis_date,
        description=description or '',
        doctor=get_optional(Doctor, doctor_id),
    )
    logger.info('Created diagnosis %s', diagnosis.pk)
    return diagnosis


@transaction.atomic
def update_diagnosis(diagnosis_id, *, diagnosis_date, description='', doctor_id=None) -> Diagnosis:
    diagnosis = get_diagnosis(diagnosis_id)
    diagnosis.diagnosis_date = diagnosis_date
    diagnosis.description = description or ''
    if doctor_id is not None:
        diagnosis.doctor = get_or_404(Doctor, doctor_id)
    diagnosis.save()
    return diagnosis


def delete_diagnosis(diagnosis_id) -> None:
    delete_or_404(Diagnosis, diagnosis_id)
    logger.info('Deleted diagnosis %s', diagnosis_id)
