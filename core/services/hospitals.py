from __future__ import annotations

import logging
from typing import Iterable, Optional

from django.db import transaction

from core.exceptions import NotFoundError
from core.models import Hospital, Ward
from core.services.common import delete_or_404, get_or_404, require

logger = logging.getLogger(__name__)


def set_wards(hospital: Hospital, ward_ids: Optional[Iterable] = None) -> Hospital:
    """Save ``hospital`` and replace its ward set with ``ward_ids``.

    Every id is resolved before anything is written, so an unknown ward
    leaves both the hospital and its associations untouched.  ``None`` or
    an empty collection keeps the current ward set.
    """
    ids = list(ward_ids or [])
    wards = []
    for wid in ids:
        ward = Ward.objects.filter(pk=wid).first()
        if ward is None:
            raise NotFoundError(f'Ward not found: {wid}')
        wards.append(ward)

    with transaction.atomic():
        hospital.save()
        if wards:
            hospital.wards.set(wards)
    return hospital


def list_hospitals():
    return Hospital.objects.prefetch_related('wards').order_by('name')


def get_hospital(hospital_id) -> Hospital:
    return get_or_404(Hospital, hospital_id)


def hospitals_by_city(city: str):
    require(city, 'City')
    return list_hospitals().filter(city=city)


def create_hospital(*, name, address='', city='', ward_ids=None) -> Hospital:
    hospital = Hospital(name=name, address=address or '', city=city or '')
    set_wards(hospital, ward_ids)
    logger.info('Created hospital %s (%s)', hospital.pk, hospital.name)
    return hospital


def update_hospital(hospital_id, *, name, address='', city='', ward_ids=None) -> Hospital:
    hospital = get_hospital(hospital_id)
    hospital.name = name
    hospital.address = address or ''
    hospital.city = city or ''
    return set_wards(hospital, ward_ids)


def delete_hospital(hospital_id) -> None:
    delete_or_404(Hospital, hospital_id)
    logger.info('Deleted hospital %s', hospital_id)
