from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from core.permissions import IsAdminOrUser, IsAdminRole
from core.serializers.staff import DoctorSerializer, DoctorWriteSerializer
from core.services import doctors as svc
from core.views.common import list_response, validated


def _fields(vd):
    return {
        'name': vd['doctorName'],
        'speciality': vd['speciality'],
        'ward_id': vd.get('wardId'),
        'hospital_id': vd.get('hospitalId'),
    }


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def doctor_list(request):
    return list_response(svc.list_doctors(), DoctorSerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def doctor_detail(request, doctor_id):
    return Response(DoctorSerializer(svc.get_doctor(doctor_id)).data)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def doctors_by_ward(request, ward_id):
    return list_response(svc.doctors_by_ward(ward_id), DoctorSerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def doctors_by_speciality(request, speciality):
    return list_response(svc.doctors_by_speciality(speciality), DoctorSerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def doctors_by_hospital(request, hospital_id):
    return list_response(svc.doctors_by_hospital(hospital_id), DoctorSerializer)


@api_view(['POST'])
@permission_classes([IsAdminRole])
def doctor_create(request):
    """Create a doctor.  When both ``wardId`` and ``hospitalId`` are given the
    ward must belong to the hospital, otherwise 400."""
    vd = validated(DoctorWriteSerializer, request.data)
    doctor = svc.create_doctor(**_fields(vd))
    return Response(DoctorSerializer(doctor).data, status=status.HTTP_201_CREATED)


@api_view(['PUT'])
@permission_classes([IsAdminRole])
def doctor_update(request, doctor_id):
    vd = validated(DoctorWriteSerializer, request.data)
    doctor = svc.update_doctor(doctor_id, **_fields(vd))
    return Response(DoctorSerializer(doctor).data)


@api_view(['DELETE'])
@permission_classes([IsAdminRole])
def doctor_delete(request, doctor_id):
    svc.delete_doctor(doctor_id)
    return Response(status=status.HTTP_204_NO_CONTENT)
