import datetime
import uuid

import pytest

from core.exceptions import MissingArgumentError, NotFoundError, ValidationError
from core.models import AppointmentStatus, Doctor, Patient
from core.services import appointments, diagnoses, doctors, nurses, patients, prescriptions, surgeries, wards
from core.services.medications import create_medication

pytestmark = pytest.mark.django_db


def test_update_doctor_full_replace_clears_placement(cardiology, rigshospitalet):
    d = doctors.create_doctor(name='Dr. A', speciality='CARDIOLOGY',
                              ward_id=cardiology.pk, hospital_id=rigshospitalet.pk)
    doctors.update_doctor(d.pk, name='Dr. A', speciality='SURGERY')
    d.refresh_from_db()
    assert d.ward is None and d.hospital is None
    assert d.speciality == 'SURGERY'


def test_doctor_queries(cardiology, rigshospitalet):
    doctors.create_doctor(name='Dr. A', speciality='CARDIOLOGY', ward_id=cardiology.pk, hospital_id=rigshospitalet.pk)
    doctors.create_doctor(name='Dr. B', speciality='NEUROLOGY')
    assert [d.name for d in doctors.doctors_by_ward(cardiology.pk)] == ['Dr. A']
    assert [d.name for d in doctors.doctors_by_hospital(rigshospitalet.pk)] == ['Dr. A']
    assert [d.name for d in doctors.doctors_by_speciality('NEUROLOGY')] == ['Dr. B']


def test_doctors_by_unknown_speciality():
    with pytest.raises(ValidationError):
        doctors.doctors_by_speciality('DENTISTRY')


def test_secondary_queries_with_unknown_ids_are_empty():
    doctors.create_doctor(name='Dr. A', speciality='CARDIOLOGY')
    unknown = uuid.uuid4()
    assert doctors.doctors_by_ward(unknown).count() == 0
    assert doctors.doctors_by_hospital(unknown).count() == 0
    assert nurses.nurses_by_ward(unknown).count() == 0
    assert nurses.nurses_by_hospital(unknown).count() == 0
    assert patients.patients_by_ward(unknown).count() == 0
    assert patients.patients_by_hospital(unknown).count() == 0
    assert appointments.appointments_by_patient(unknown).count() == 0
    assert appointments.appointments_by_doctor(unknown).count() == 0
    assert appointments.appointments_by_nurse(unknown).count() == 0
    assert diagnoses.diagnoses_by_doctor(unknown).count() == 0
    assert prescriptions.prescriptions_by_patient(unknown).count() == 0
    assert surgeries.surgeries_by_patient(unknown).count() == 0
    assert wards.wards_by_hospital(unknown).count() == 0


def test_secondary_queries_require_an_id():
    with pytest.raises(MissingArgumentError) as exc:
        doctors.doctors_by_ward(None)
    assert str(exc.value.detail) == 'Ward ID cannot be null'


def test_delete_doctor_sets_references_null():
    d = doctors.create_doctor(name='Dr. A', speciality='CARDIOLOGY')
    dx = diagnoses.create_diagnosis(diagnosis_date=datetime.date(2024, 1, 2), description='Flu', doctor_id=d.pk)
    doctors.delete_doctor(d.pk)
    dx.refresh_from_db()
    assert dx.doctor is None


def test_delete_missing_doctor_deletes_nothing():
    doctors.create_doctor(name='Dr. A', speciality='CARDIOLOGY')
    with pytest.raises(NotFoundError):
        doctors.delete_doctor(uuid.uuid4())
    assert Doctor.objects.count() == 1


def test_nurse_ward_only_assignment(neurology, rigshospitalet):
    n = nurses.create_nurse(name='Mette', speciality='ICU', ward_id=neurology.pk)
    assert n.ward == neurology and n.hospital is None
    assert list(nurses.nurses_by_ward(neurology.pk)) == [n]


def test_patient_diagnoses_replace_semantics():
    dx1 = diagnoses.create_diagnosis(diagnosis_date=datetime.date(2024, 1, 1), description='A')
    dx2 = diagnoses.create_diagnosis(diagnosis_date=datetime.date(2024, 1, 2), description='B')
    p = patients.create_patient(name='Lars', date_of_birth=datetime.date(1980, 5, 17), diagnosis_ids=[dx1.pk])

    patients.update_patient(p.pk, name='Lars', date_of_birth=datetime.date(1980, 5, 17))
    assert list(p.diagnoses.all()) == [dx1]

    patients.update_patient(p.pk, name='Lars', date_of_birth=datetime.date(1980, 5, 17), diagnosis_ids=[dx2.pk])
    assert list(p.diagnoses.all()) == [dx2]

    patients.update_patient(p.pk, name='Lars', date_of_birth=datetime.date(1980, 5, 17), diagnosis_ids=[])
    assert p.diagnoses.count() == 0


def test_patient_unknown_diagnosis():
    missing = uuid.uuid4()
    with pytest.raises(NotFoundError) as exc:
        patients.create_patient(name='Lars', date_of_birth=datetime.date(1980, 5, 17), diagnosis_ids=[missing])
    assert str(exc.value.detail) == f'Diagnosis not found: {missing}'
    assert Patient.objects.count() == 0


def test_appointment_update_keeps_references_when_ids_absent():
    d = doctors.create_doctor(name='Dr. A', speciality='CARDIOLOGY')
    p = patients.create_patient(name='Lars', date_of_birth=datetime.date(1980, 5, 17))
    a = appointments.create_appointment(appointment_date=datetime.date(2024, 3, 1), reason='Checkup',
                                        patient_id=p.pk, doctor_id=d.pk)
    assert a.status == AppointmentStatus.SCHEDULED

    appointments.update_appointment(a.pk, appointment_date=datetime.date(2024, 3, 2), status='COMPLETED')
    a.refresh_from_db()
    assert a.patient == p and a.doctor == d
    assert a.status == 'COMPLETED'
    assert a.reason == ''


def test_appointment_date_queries():
    for day in (1, 5, 10):
        appointments.create_appointment(appointment_date=datetime.date(2024, 3, day))
    in_range = appointments.appointments_by_date_range(datetime.date(2024, 3, 1), datetime.date(2024, 3, 5))
    assert [a.appointment_date.day for a in in_range] == [1, 5]
    assert appointments.appointments_by_date(datetime.date(2024, 3, 10)).count() == 1


def test_appointment_status_query_rejects_unknown_status():
    with pytest.raises(ValidationError):
        appointments.appointments_by_status('LOST')


def test_appointment_date_range_requires_both_ends():
    with pytest.raises(MissingArgumentError):
        appointments.appointments_by_date_range(None, datetime.date(2024, 1, 1))


def test_prescription_and_surgery_by_patient():
    p = patients.create_patient(name='Lars', date_of_birth=datetime.date(1980, 5, 17))
    med = create_medication(name='Ibuprofen', dosage='400mg')
    rx = prescriptions.create_prescription(start_date=datetime.date(2024, 1, 1), patient_id=p.pk,
                                           medication_id=med.pk)
    op = surgeries.create_surgery(surgery_date=datetime.date(2024, 2, 1), description='Appendectomy', patient_id=p.pk)
    assert list(prescriptions.prescriptions_by_patient(p.pk)) == [rx]
    assert list(surgeries.surgeries_by_patient(p.pk)) == [op]


def test_prescription_update_with_unknown_medication():
    rx = prescriptions.create_prescription(start_date=datetime.date(2024, 1, 1))
    with pytest.raises(NotFoundError) as exc:
        prescriptions.update_prescription(rx.pk, start_date=datetime.date(2024, 1, 1), medication_id=uuid.uuid4())
    assert str(exc.value.detail) == 'Medication not found'
