from __future__ import annotations

import logging

from django.db import transaction

from core.exceptions import ValidationError
from core.models import Doctor, DoctorSpeciality
from core.services.affiliation import validate_assignment
from core.services.common import delete_or_404, get_or_404, require

logger = logging.getLogger(__name__)


def list_doctors():
    return Doctor.objects.select_related('ward', 'hospital').order_by('name')


def get_doctor(doctor_id) -> Doctor:
    return get_or_404(Doctor, doctor_id)


def doctors_by_ward(ward_id):
    require(ward_id, 'Ward ID')
    return list_doctors().filter(ward_id=ward_id)


def doctors_by_hospital(hospital_id):
    require(hospital_id, 'Hospital ID')
    return list_doctors().filter(hospital_id=hospital_id)


def doctors_by_speciality(speciality):
    require(speciality, 'Speciality')
    if speciality not in DoctorSpeciality.values:
        raise ValidationError(f'Invalid speciality: {speciality}')
    return list_doctors().filter(speciality=speciality)


@transaction.atomic
def create_doctor(*, name, speciality, ward_id=None, hospital_id=None) -> Doctor:
    ward, hospital = validate_assignment(ward_id, hospital_id)
    doctor = Doctor.objects.create(name=name, speciality=speciality, ward=ward, hospital=hospital)
    logger.info('Created doctor %s', doctor.pk)
    return doctor


@transaction.atomic
def update_doctor(doctor_id, *, name, speciality, ward_id=None, hospital_id=None) -> Doctor:
    doctor = get_doctor(doctor_id)
    ward, hospital = validate_assignment(ward_id, hospital_id)
    doctor.name = name
    doctor.speciality = speciality
    doctor.ward = ward
    doctor.hospital = hospital
    doctor.save()
    return doctor


def delete_doctor(doctor_id) -> None:
    delete_or_404(Doctor, doctor_id)
    logger.info('Deleted doctor %s', doctor_id)
