from __future__ import annotations

import logging

from django.db import transaction

from core.models import Nurse
from core.services.affiliation import validate_assignment
from core.services.common import delete_or_404, get_or_404, require

logger = logging.getLogger(__name__)


def list_nurses():
    return Nurse.objects.select_related('ward', 'hospital').order_by('name')


def get_nurse(nurse_id) -> Nurse:
    return get_or_404(Nurse, nurse_id)


def nurses_by_ward(ward_id):
    require(ward_id, 'Ward ID')
    return list_nurses().filter(ward_id=ward_id)


def nurses_by_hospital(hospital_id):
    require(hospital_id, 'Hospital ID')
    return list_nurses().filter(hospital_id=hospital_id)


@transaction.atomic
def create_nurse(*, name, speciality, ward_id=None, hospital_id=None) -> Nurse:
    ward, hospital = validate_assignment(ward_id, hospital_id)
    nurse = Nurse.objects.create(name=name, speciality=speciality, ward=ward, hospital=hospital)
    logger.info('Created nurse %s', nurse.pk)
    return nurse


@transaction.atomic
def update_nurse(nurse_id, *, name, speciality, ward_id=None, hospital_id=None) -> Nurse:
    nurse = get_nurse(nurse_id)
    ward, hospital = validate_assignment(ward_id, hospital_id)
    nurse.name = name
    nurse.speciality = speciality
    nurse.ward = ward
    nurse.hospital = hospital
    nurse.save()
    return nurse


def delete_nurse(nurse_id) -> None:
    delete_or_404(Nurse, nurse_id)
    logger.info('Deleted nurse %s', nurse_id)
