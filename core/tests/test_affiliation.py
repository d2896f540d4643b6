import uuid

import pytest

from core.exceptions import NotFoundError, ValidationError
from core.models import Doctor, Hospital, Nurse, Patient, Ward, WardType
from core.services.affiliation import is_affiliated, validate_assignment
from core.services.doctors import create_doctor, update_doctor
from core.services.nurses import create_nurse, update_nurse
from core.services.patients import create_patient, update_patient

pytestmark = pytest.mark.django_db


def test_ward_in_hospital_is_affiliated(cardiology, rigshospitalet):
    assert is_affiliated(cardiology, rigshospitalet)


def test_ward_of_other_hospital_is_not_affiliated(neurology, rigshospitalet, aarhus):
    assert not is_affiliated(neurology, rigshospitalet)
    assert is_affiliated(neurology, aarhus)


def test_ward_without_memberships_is_not_affiliated(rigshospitalet):
    lonely = Ward.objects.create(type=WardType.SURGERY, max_capacity=5)
    assert not is_affiliated(lonely, rigshospitalet)


def test_unsaved_ward_is_not_affiliated(rigshospitalet):
    assert not is_affiliated(Ward(type=WardType.SURGERY, max_capacity=1), rigshospitalet)


def test_ward_shared_by_two_hospitals(cardiology, rigshospitalet, aarhus):
    aarhus.wards.add(cardiology)
    assert is_affiliated(cardiology, rigshospitalet)
    assert is_affiliated(cardiology, aarhus)


def test_validate_assignment_without_ids():
    assert validate_assignment(None, None) == (None, None)


def test_validate_assignment_ward_only_skips_check(neurology, rigshospitalet):
    ward, hospital = validate_assignment(neurology.pk, None)
    assert ward == neurology and hospital is None


def test_validate_assignment_hospital_only_skips_check(rigshospitalet):
    ward, hospital = validate_assignment(None, rigshospitalet.pk)
    assert ward is None and hospital == rigshospitalet


def test_validate_assignment_unknown_ward():
    with pytest.raises(NotFoundError) as exc:
        validate_assignment(uuid.uuid4(), None)
    assert str(exc.value.detail) == 'Ward not found'


def test_validate_assignment_unknown_hospital(cardiology):
    with pytest.raises(NotFoundError) as exc:
        validate_assignment(cardiology.pk, uuid.uuid4())
    assert str(exc.value.detail) == 'Hospital not found'


def test_validate_assignment_rejects_foreign_ward(neurology, rigshospitalet):
    with pytest.raises(ValidationError) as exc:
        validate_assignment(neurology.pk, rigshospitalet.pk)
    msg = str(exc.value.detail)
    assert 'does not belong to the selected hospital' in msg
    assert 'Rigshospitalet' in msg


def test_create_doctor_with_affiliated_ward(cardiology, rigshospitalet):
    doctor = create_doctor(name='Dr. Jensen', speciality='CARDIOLOGY',
                           ward_id=cardiology.pk, hospital_id=rigshospitalet.pk)
    doctor.refresh_from_db()
    assert doctor.ward == cardiology
    assert doctor.hospital == rigshospitalet


def test_create_doctor_with_foreign_ward_persists_nothing(neurology, rigshospitalet):
    with pytest.raises(ValidationError):
        create_doctor(name='Dr. Hansen', speciality='NEUROLOGY',
                      ward_id=neurology.pk, hospital_id=rigshospitalet.pk)
    assert Doctor.objects.count() == 0


def test_update_doctor_with_foreign_ward_keeps_old_values(cardiology, neurology, rigshospitalet):
    doctor = create_doctor(name='Dr. Jensen', speciality='CARDIOLOGY',
                           ward_id=cardiology.pk, hospital_id=rigshospitalet.pk)
    with pytest.raises(ValidationError):
        update_doctor(doctor.pk, name='Dr. Renamed', speciality='NEUROLOGY',
                      ward_id=neurology.pk, hospital_id=rigshospitalet.pk)
    doctor.refresh_from_db()
    assert doctor.name == 'Dr. Jensen'
    assert doctor.ward == cardiology


def test_create_nurse_with_foreign_ward_persists_nothing(neurology, rigshospitalet):
    with pytest.raises(ValidationError):
        create_nurse(name='Mette', speciality='ICU', ward_id=neurology.pk, hospital_id=rigshospitalet.pk)
    assert Nurse.objects.count() == 0


def test_create_patient_with_foreign_ward_persists_nothing(neurology, rigshospitalet):
    with pytest.raises(ValidationError):
        create_patient(name='Lars', date_of_birth='1980-01-01',
                       ward_id=neurology.pk, hospital_id=rigshospitalet.pk)
    assert Patient.objects.count() == 0


def test_update_nurse_into_affiliated_ward(neurology, aarhus):
    nurse = create_nurse(name='Mette', speciality='ICU')
    update_nurse(nurse.pk, name='Mette', speciality='ICU', ward_id=neurology.pk, hospital_id=aarhus.pk)
    nurse.refresh_from_db()
    assert nurse.ward == neurology
    assert nurse.hospital == aarhus


def test_update_nurse_with_foreign_ward_keeps_old_values(cardiology, neurology, rigshospitalet):
    nurse = create_nurse(name='Mette', speciality='ICU', ward_id=cardiology.pk, hospital_id=rigshospitalet.pk)
    with pytest.raises(ValidationError):
        update_nurse(nurse.pk, name='Renamed', speciality='EMERGENCY',
                     ward_id=neurology.pk, hospital_id=rigshospitalet.pk)
    nurse.refresh_from_db()
    assert nurse.name == 'Mette'
    assert nurse.speciality == 'ICU'
    assert nurse.ward == cardiology


def test_update_patient_into_affiliated_ward(cardiology, rigshospitalet):
    patient = create_patient(name='Lars', date_of_birth='1980-01-01')
    update_patient(patient.pk, name='Lars', date_of_birth='1980-01-01',
                   ward_id=cardiology.pk, hospital_id=rigshospitalet.pk)
    patient.refresh_from_db()
    assert patient.ward == cardiology
    assert patient.hospital == rigshospitalet


def test_update_patient_with_foreign_ward_keeps_old_values(cardiology, neurology, rigshospitalet):
    patient = create_patient(name='Lars', date_of_birth='1980-01-01',
                             ward_id=cardiology.pk, hospital_id=rigshospitalet.pk)
    with pytest.raises(ValidationError) as exc:
        update_patient(patient.pk, name='Renamed', date_of_birth='1990-02-02',
                       ward_id=neurology.pk, hospital_id=rigshospitalet.pk)
    assert 'Rigshospitalet' in str(exc.value.detail)
    patient.refresh_from_db()
    assert patient.name == 'Lars'
    assert patient.ward == cardiology
    assert patient.hospital == rigshospitalet


def test_affiliation_follows_ward_set_changes(cardiology, neurology):
    h = Hospital.objects.create(name='Odense Universitetshospital', city='Odense')
    assert not is_affiliated(cardiology, h)
    h.wards.set([cardiology, neurology])
    assert is_affiliated(cardiology, h)
    h.wards.set([neurology])
    assert not is_affiliated(cardiology, h)
