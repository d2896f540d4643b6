"""
URL mappings for the hospital administration API.

Every resource exposes ``all``, ``<id>``, ``create``, ``update/<id>`` and
``delete/<id>`` plus its secondary queries.  Trailing slashes are omitted
to match the front end.
"""
from django.urls import path, include

from .auth_views import login_view, register_view
from .views import health
from .views.appointments import (
    appointment_list,
    appointment_detail,
    appointments_by_patient,
    appointments_by_doctor,
    appointments_by_nurse,
    appointments_by_status,
    appointments_by_date,
    appointments_by_date_range,
    appointment_create,
    appointment_update,
    appointment_delete,
)
from .views.diagnoses import (
    diagnosis_list,
    diagnosis_detail,
    diagnoses_by_doctor,
    diagnosis_create,
    diagnosis_update,
    diagnosis_delete,
)
from .views.doctors import (
    doctor_list,
    doctor_detail,
    doctors_by_ward,
    doctors_by_speciality,
    doctors_by_hospital,
    doctor_create,
    doctor_update,
    doctor_delete,
)
from .views.hospitals import (
    hospital_list,
    hospital_detail,
    hospitals_by_city,
    hospital_create,
    hospital_update,
    hospital_delete,
)
from .views.integrations import current_time, current_weather
from .views.medications import (
    medication_list,
    medication_detail,
    medication_create,
    medication_update,
    medication_delete,
)
from .views.nurses import (
    nurse_list,
    nurse_detail,
    nurses_by_ward,
    nurses_by_hospital,
    nurse_create,
    nurse_update,
    nurse_delete,
)
from .views.patients import (
    patient_list,
    patient_detail,
    patients_by_ward,
    patients_by_hospital,
    patient_create,
    patient_update,
    patient_delete,
)
from .views.prescriptions import (
    prescription_list,
    prescription_detail,
    prescriptions_by_patient,
    prescription_create,
    prescription_update,
    prescription_delete,
)
from .views.surgeries import (
    surgery_list,
    surgery_detail,
    surgeries_by_patient,
    surgery_create,
    surgery_update,
    surgery_delete,
)
from .views.wards import (
    ward_list,
    ward_detail,
    wards_by_type,
    wards_by_hospital,
    ward_create,
    ward_update,
    ward_delete,
)

urlpatterns = [
    # Auth
    path('auth/login', login_view, name='login_view'),
    path('auth/register', register_view, name='register_view'),

    # Hospitals
    path('hospitals/all', hospital_list, name='hospital_list'),
    path('hospitals/by-city/<str:city>', hospitals_by_city, name='hospitals_by_city'),
    path('hospitals/create', hospital_create, name='hospital_create'),
    path('hospitals/update/<uuid:hospital_id>', hospital_update, name='hospital_update'),
    path('hospitals/delete/<uuid:hospital_id>', hospital_delete, name='hospital_delete'),
    path('hospitals/<uuid:hospital_id>', hospital_detail, name='hospital_detail'),

    # Wards
    path('wards/all', ward_list, name='ward_list'),
    path('wards/by-type/<str:ward_type>', wards_by_type, name='wards_by_type'),
    path('wards/by-hospital/<uuid:hospital_id>', wards_by_hospital, name='wards_by_hospital'),
    path('wards/create', ward_create, name='ward_create'),
    path('wards/update/<uuid:ward_id>', ward_update, name='ward_update'),
    path('wards/delete/<uuid:ward_id>', ward_delete, name='ward_delete'),
    path('wards/<uuid:ward_id>', ward_detail, name='ward_detail'),

    # Doctors
    path('doctors/all', doctor_list, name='doctor_list'),
    path('doctors/by-ward/<uuid:ward_id>', doctors_by_ward, name='doctors_by_ward'),
    path('doctors/by-speciality/<str:speciality>', doctors_by_speciality, name='doctors_by_speciality'),
    path('doctors/by-hospital/<uuid:hospital_id>', doctors_by_hospital, name='doctors_by_hospital'),
    path('doctors/create', doctor_create, name='doctor_create'),
    path('doctors/update/<uuid:doctor_id>', doctor_update, name='doctor_update'),
    path('doctors/delete/<uuid:doctor_id>', doctor_delete, name='doctor_delete'),
    path('doctors/<uuid:doctor_id>', doctor_detail, name='doctor_detail'),

    # Nurses
    path('nurses/all', nurse_list, name='nurse_list'),
    path('nurses/by-ward/<uuid:ward_id>', nurses_by_ward, name='nurses_by_ward'),
    path('nurses/by-hospital/<uuid:hospital_id>', nurses_by_hospital, name='nurses_by_hospital'),
    path('nurses/create', nurse_create, name='nurse_create'),
    path('nurses/update/<uuid:nurse_id>', nurse_update, name='nurse_update'),
    path('nurses/delete/<uuid:nurse_id>', nurse_delete, name='nurse_delete'),
    path('nurses/<uuid:nurse_id>', nurse_detail, name='nurse_detail'),

    # Patients
    path('patients/all', patient_list, name='patient_list'),
    path('patients/by-ward/<uuid:ward_id>', patients_by_ward, name='patients_by_ward'),
    path('patients/by-hospital/<uuid:hospital_id>', patients_by_hospital, name='patients_by_hospital'),
    path('patients/create', patient_create, name='patient_create'),
    path('patients/update/<uuid:patient_id>', patient_update, name='patient_update'),
    path('patients/delete/<uuid:patient_id>', patient_delete, name='patient_delete'),
    path('patients/<uuid:patient_id>', patient_detail, name='patient_detail'),

    # Appointments
    path('appointments/all', appointment_list, name='appointment_list'),
    path('appointments/by-patient/<uuid:patient_id>', appointments_by_patient, name='appointments_by_patient'),
    path('appointments/by-doctor/<uuid:doctor_id>', appointments_by_doctor, name='appointments_by_doctor'),
    path('appointments/by-nurse/<uuid:nurse_id>', appointments_by_nurse, name='appointments_by_nurse'),
    path('appointments/by-status/<str:status_value>', appointments_by_status, name='appointments_by_status'),
    path('appointments/by-date/<str:day>', appointments_by_date, name='appointments_by_date'),
    path('appointments/by-date-range', appointments_by_date_range, name='appointments_by_date_range'),
    path('appointments/create', appointment_create, name='appointment_create'),
    path('appointments/update/<uuid:appointment_id>', appointment_update, name='appointment_update'),
    path('appointments/delete/<uuid:appointment_id>', appointment_delete, name='appointment_delete'),
    path('appointments/<uuid:appointment_id>', appointment_detail, name='appointment_detail'),

    # Diagnoses
    path('diagnoses/all', diagnosis_list, name='diagnosis_list'),
    path('diagnoses/by-doctor/<uuid:doctor_id>', diagnoses_by_doctor, name='diagnoses_by_doctor'),
    path('diagnoses/create', diagnosis_create, name='diagnosis_create'),
    path('diagnoses/update/<uuid:diagnosis_id>', diagnosis_update, name='diagnosis_update'),
    path('diagnoses/delete/<uuid:diagnosis_id>', diagnosis_delete, name='diagnosis_delete'),
    path('diagnoses/<uuid:diagnosis_id>', diagnosis_detail, name='diagnosis_detail'),

    # Medications
    path('medications/all', medication_list, name='medication_list'),
    path('medications/create', medication_create, name='medication_create'),
    path('medications/update/<uuid:medication_id>', medication_update, name='medication_update'),
    path('medications/delete/<uuid:medication_id>', medication_delete, name='medication_delete'),
    path('medications/<uuid:medication_id>', medication_detail, name='medication_detail'),

    # Prescriptions
    path('prescriptions/all', prescription_list, name='prescription_list'),
    path('prescriptions/by-patient/<uuid:patient_id>', prescriptions_by_patient, name='prescriptions_by_patient'),
    path('prescriptions/create', prescription_create, name='prescription_create'),
    path('prescriptions/update/<uuid:prescription_id>', prescription_update, name='prescription_update'),
    path('prescriptions/delete/<uuid:prescription_id>', prescription_delete, name='prescription_delete'),
    path('prescriptions/<uuid:prescription_id>', prescription_detail, name='prescription_detail'),

    # Surgeries
    path('surgeries/all', surgery_list, name='surgery_list'),
    path('surgeries/by-patient/<uuid:patient_id>', surgeries_by_patient, name='surgeries_by_patient'),
    path('surgeries/create', surgery_create, name='surgery_create'),
    path('surgeries/update/<uuid:surgery_id>', surgery_update, name='surgery_update'),
    path('surgeries/delete/<uuid:surgery_id>', surgery_delete, name='surgery_delete'),
    path('surgeries/<uuid:surgery_id>', surgery_detail, name='surgery_detail'),

    # Integrations
    path('api/time', current_time, name='current_time'),
    path('api/weather', current_weather, name='current_weather'),

    # Health & metrics
    path('healthz', health.healthz, name='healthz'),
    path('', include('django_prometheus.urls')),
]
