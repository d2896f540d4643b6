from rest_framework import serializers, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from core.permissions import IsAdminOrUser, IsAdminRole
from core.serializers.clinical import AppointmentSerializer, AppointmentWriteSerializer, DateRangeQuerySerializer
from core.services import appointments as svc
from core.views.common import list_response, validated


def _fields(vd):
    return {
        'appointment_date': vd['appointmentDate'],
        'reason': vd.get('reason', ''),
        'status': vd.get('status'),
        'patient_id': vd.get('patientId'),
        'doctor_id': vd.get('doctorId'),
        'nurse_id': vd.get('nurseId'),
    }


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def appointment_list(request):
    return list_response(svc.list_appointments(), AppointmentSerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def appointment_detail(request, appointment_id):
    return Response(AppointmentSerializer(svc.get_appointment(appointment_id)).data)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def appointments_by_patient(request, patient_id):
    return list_response(svc.appointments_by_patient(patient_id), AppointmentSerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def appointments_by_doctor(request, doctor_id):
    return list_response(svc.appointments_by_doctor(doctor_id), AppointmentSerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def appointments_by_nurse(request, nurse_id):
    return list_response(svc.appointments_by_nurse(nurse_id), AppointmentSerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def appointments_by_status(request, status_value):
    return list_response(svc.appointments_by_status(status_value), AppointmentSerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def appointments_by_date(request, day):
    """``day`` is YYYY-MM-DD; anything else is a 400."""
    parsed = serializers.DateField().to_internal_value(day)
    return list_response(svc.appointments_by_date(parsed), AppointmentSerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def appointments_by_date_range(request):
    """Query params ``startDate`` and ``endDate`` (YYYY-MM-DD), both inclusive."""
    q = validated(DateRangeQuerySerializer, request.query_params)
    return list_response(svc.appointments_by_date_range(q['startDate'], q['endDate']), AppointmentSerializer)


@api_view(['POST'])
@permission_classes([IsAdminOrUser])
def appointment_create(request):
    vd = validated(AppointmentWriteSerializer, request.data)
    appointment = svc.create_appointment(**_fields(vd))
    return Response(AppointmentSerializer(appointment).data, status=status.HTTP_201_CREATED)


@api_view(['PUT'])
@permission_classes([IsAdminRole])
def appointment_update(request, appointment_id):
    vd = validated(AppointmentWriteSerializer, request.data)
    appointment = svc.update_appointment(appointment_id, **_fields(vd))
    return Response(AppointmentSerializer(appointment).data)


@api_view(['DELETE'])
@permission_classes([IsAdminRole])
def appointment_delete(request, appointment_id):
    svc.delete_appointment(appointment_id)
    return Response(status=status.HTTP_204_NO_CONTENT)
