from __future__ import annotations

import logging

from django.db import transaction

from core.exceptions import ValidationError
from core.models import Appointment, AppointmentStatus, Doctor, Nurse, Patient
from core.services.common import delete_or_404, get_optional, get_or_404, require

logger = logging.getLogger(__name__)


def list_appointments():
    return Appointment.objects.select_related('patient', 'doctor', 'nurse').order_by('appointment_date')


def get_appointment(appointment_id) -> Appointment:
    return get_or_404(Appointment, appointment_id)


def appointments_by_patient(patient_id):
    require(patient_id, 'Patient ID')
    return list_appointments().filter(patient_id=patient_id)


def appointments_by_doctor(doctor_id):
    require(doctor_id, 'Doctor ID')
    return list_appointments().filter(doctor_id=doctor_id)


def appointments_by_nurse(nurse_id):
    require(nurse_id, 'Nurse ID')
    return list_appointments().filter(nurse_id=nurse_id)


def appointments_by_status(status):
    require(status, 'Status')
    if status not in AppointmentStatus.values:
        raise ValidationError(f'Invalid appointment status: {status}')
    return list_appointments().filter(status=status)


def appointments_by_date(day):
    require(day, 'Date')
    return list_appointments().filter(appointment_date=day)


def appointments_by_date_range(start_date, end_date):
    """Appointments with ``start_date <= appointment_date <= end_date``."""
    require(start_date, 'Start date')
    require(end_date, 'End date')
    return list_appointments().filter(appointment_date__range=(start_date, end_date))


@transaction.atomic
def create_appointment(*, appointment_date, reason='', status=AppointmentStatus.SCHEDULED,
                       patient_id=None, doctor_id=None, nurse_id=None) -> Appointment:
    appointment = Appointment.objects.create(
        appointment_date=appointment_date,
        reason=reason or '',
        status=status or AppointmentStatus.SCHEDULED,
        patient=get_optional(Patient, patient_id),
        doctor=get_optional(Doctor, doctor_id),
        nurse=get_optional(Nurse, nurse_id),
    )
    logger.info('Created appointment %s', appointment.pk)
    return appointment


@transaction.atomic
def update_appointment(appointment_id, *, appointment_date, reason='', status=None,
                       patient_id=None, doctor_id=None, nurse_id=None) -> Appointment:
    """Overwrite scalar fields; references change only when an id is given."""
    appointment = get_appointment(appointment_id)
    appointment.appointment_date = appointment_date
    appointment.reason = reason or ''
    if status:
        appointment.status = status
    if patient_id is not None:
        appointment.patient = get_or_404(Patient, patient_id)
    if doctor_id is not None:
        appointment.doctor = get_or_404(Doctor, doctor_id)
    if nurse_id is not None:
        appointment.nurse = get_or_404(Nurse, nurse_id)
    appointment.save()
    return appointment


def delete_appointment(appointment_id) -> None:
    delete_or_404(Appointment, appointment_id)
    logger.info('Deleted appointment %s', appointment_id)
