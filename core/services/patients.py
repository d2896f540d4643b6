from __future__ import annotations

import logging
from typing import Iterable, Optional

from django.db import transaction

from core.exceptions import NotFoundError
from core.models import Diagnosis, Patient
from core.services.affiliation import validate_assignment
from core.services.common import delete_or_404, get_or_404, require

logger = logging.getLogger(__name__)


def _resolve_diagnoses(diagnosis_ids: Iterable) -> list[Diagnosis]:
    diagnoses = []
    for did in diagnosis_ids:
        diagnosis = Diagnosis.objects.filter(pk=did).first()
        if diagnosis is None:
            raise NotFoundError(f'Diagnosis not found: {did}')
        diagnoses.append(diagnosis)
    return diagnoses


def list_patients():
    return Patient.objects.select_related('ward', 'hospital').prefetch_related('diagnoses').order_by('name')


def get_patient(patient_id) -> Patient:
    return get_or_404(Patient, patient_id)


def patients_by_ward(ward_id):
    require(ward_id, 'Ward ID')
    return list_patients().filter(ward_id=ward_id)


def patients_by_hospital(hospital_id):
    require(hospital_id, 'Hospital ID')
    return list_patients().filter(hospital_id=hospital_id)


@transaction.atomic
def create_patient(*, name, date_of_birth, gender='', ward_id=None, hospital_id=None,
                   diagnosis_ids: Optional[Iterable] = None) -> Patient:
    ward, hospital = validate_assignment(ward_id, hospital_id)
    diagnoses = _resolve_diagnoses(diagnosis_ids or [])
    patient = Patient.objects.create(
        name=name, date_of_birth=date_of_birth, gender=gender or '', ward=ward, hospital=hospital
    )
    if diagnoses:
        patient.diagnoses.set(diagnoses)
    logger.info('Created patient %s', patient.pk)
    return patient


@transaction.atomic
def update_patient(patient_id, *, name, date_of_birth, gender='', ward_id=None, hospital_id=None,
                   diagnosis_ids: Optional[Iterable] = None) -> Patient:
    """Full replace of the patient's fields and placement.

    ``diagnosis_ids`` of ``None`` keeps the current diagnoses; a list
    (possibly empty) replaces them.
    """
    patient = get_patient(patient_id)
    ward, hospital = validate_assignment(ward_id, hospital_id)
    diagnoses = _resolve_diagnoses(diagnosis_ids) if diagnosis_ids is not None else None
    patient.name = name
    patient.date_of_birth = date_of_birth
    patient.gender = gender or ''
    patient.ward = ward
    patient.hospital = hospital
    patient.save()
    if diagnoses is not None:
        patient.diagnoses.set(diagnoses)
    return patient


def delete_patient(patient_id) -> None:
    delete_or_404(Patient, patient_id)
    logger.info('Deleted patient %s', patient_id)
