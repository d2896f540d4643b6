"""
Ward/hospital affiliation rules.

A ward may only be assigned together with a hospital when the hospital's
ward set contains it.  The check always goes through the Hospital/Ward
association table so that it sees exactly what has been committed by
:func:`core.services.hospitals.set_wards`.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from core.exceptions import NotFoundError, ValidationError
from core.models import Hospital, Ward

logger = logging.getLogger(__name__)


def is_affiliated(ward: Ward, hospital: Hospital) -> bool:
    """True iff ``hospital`` holds ``ward`` in its ward set."""
    if ward.pk is None or hospital.pk is None:
        return False
    return Hospital.wards.through.objects.filter(hospital_id=hospital.pk, ward_id=ward.pk).exists()


def validate_assignment(ward_id=None, hospital_id=None) -> Tuple[Optional[Ward], Optional[Hospital]]:
    """Resolve an optional ward/hospital pair for a doctor, nurse or patient.

    Missing ids resolve to ``None``.  Unknown ids raise
    :class:`NotFoundError`; when both are given the ward must belong to the
    hospital, otherwise :class:`ValidationError` is raised.  Nothing is
    written here, so callers validate before saving.
    """
    ward = None
    hospital = None
    if ward_id is not None:
        ward = Ward.objects.filter(pk=ward_id).first()
        if ward is None:
            raise NotFoundError('Ward not found')
    if hospital_id is not None:
        hospital = Hospital.objects.filter(pk=hospital_id).first()
        if hospital is None:
            raise NotFoundError('Hospital not found')

    if ward is not None and hospital is not None and not is_affiliated(ward, hospital):
        logger.info('Rejected ward %s for hospital %s: not affiliated', ward.pk, hospital.pk)
        raise ValidationError(
            'The selected ward does not belong to the selected hospital. '
            f'Please select a ward that exists in {hospital.name}.'
        )
    return ward, hospital
