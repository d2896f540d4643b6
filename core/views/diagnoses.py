from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from core.permissions import IsAdminOrUser, IsAdminRole
from core.serializers.clinical import DiagnosisSerializer, DiagnosisWriteSerializer
from core.services import diagnoses as svc
from core.views.common import list_response, validated


def _fields(vd):
    return {
        'diagnosis_date': vd['diagnosisDate'],
        'description': vd.get('description', ''),
        'doctor_id': vd.get('doctorId'),
    }


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def diagnosis_list(request):
    return list_response(svc.list_diagnoses(), DiagnosisSerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def diagnosis_detail(request, diagnosis_id):
    return Response(DiagnosisSerializer(svc.get_diagnosis(diagnosis_id)).data)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def diagnoses_by_doctor(request, doctor_id):
    return list_response(svc.diagnoses_by_doctor(doctor_id), DiagnosisSerializer)


@api_view(['POST'])
@permission_classes([IsAdminOrUser])
def diagnosis_create(request):
    vd = validated(DiagnosisWriteSerializer, request.data)
    diagnosis = svc.create_diagnosis(**_fields(vd))
    return Response(DiagnosisSerializer(diagnosis).data, status=status.HTTP_201_CREATED)


@api_view(['PUT'])
@permission_classes([IsAdminRole])
def diagnosis_update(request, diagnosis_id):
    vd = validated(DiagnosisWriteSerializer, request.data)
    diagnosis = svc.update_diagnosis(diagnosis_id, **_fields(vd))
    return Response(DiagnosisSerializer(diagnosis).data)


@api_view(['DELETE'])
@permission_classes([IsAdminRole])
def diagnosis_delete(request, diagnosis_id):
    svc.delete_diagnosis(diagnosis_id)
    return Response(status=status.HTTP_204_NO_CONTENT)
