from __future__ import annotations

import logging

from core.models import Medication
from core.services.common import delete_or_404, get_or_404

logger = logging.getLogger(__name__)


def list_medications():
    return Medication.objects.order_by('name')


def get_medication(medication_id) -> Medication:
    return get_or_404(Medication, medication_id)


def create_medication(*, name, dosage='') -> Medication:
    medication = Medication.objects.create(name=name, dosage=dosage or '')
    logger.info('Created medication %s', medication.pk)
    return medication


def update_medication(medication_id, *, name, dosage='') -> Medication:
    medication = get_medication(medication_id)
    medication.name = name
    medication.dosage = dosage or ''
    medication.save()
    return medication


def delete_medication(medication_id) -> None:
    delete_or_404(Medication, medication_id)
    logger.info('Deleted medication %s', medication_id)
