from __future__ import annotations

import logging

from core.exceptions import ValidationError
from core.models import Ward, WardType
from core.services.common import delete_or_404, get_or_404, require

logger = logging.getLogger(__name__)


def list_wards():
    return Ward.objects.prefetch_related('hospitals').order_by('type')


def get_ward(ward_id) -> Ward:
    return get_or_404(Ward, ward_id)


def wards_by_type(ward_type):
    require(ward_type, 'Ward type')
    if ward_type not in WardType.values:
        raise ValidationError(f'Invalid ward type: {ward_type}')
    return list_wards().filter(type=ward_type)


def wards_by_hospital(hospital_id):
    require(hospital_id, 'Hospital ID')
    return list_wards().filter(hospitals__pk=hospital_id)


def create_ward(*, type, max_capacity) -> Ward:
    ward = Ward.objects.create(type=type, max_capacity=max_capacity)
    logger.info('Created ward %s (%s)', ward.pk, ward.type)
    return ward


def update_ward(ward_id, *, type, max_capacity) -> Ward:
    ward = get_ward(ward_id)
    ward.type = type
    ward.max_capacity = max_capacity
    ward.save()
    return ward


def delete_ward(ward_id) -> None:
    delete_or_404(Ward, ward_id)
    logger.info('Deleted ward %s', ward_id)
