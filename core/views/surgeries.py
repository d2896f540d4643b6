from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from core.permissions import IsAdminOrUser, IsAdminRole
from core.serializers.clinical import SurgerySerializer, SurgeryWriteSerializer
from core.services import surgeries as svc
from core.views.common import list_response, validated


def _fields(vd):
    return {
        'surgery_date': vd['surgeryDate'],
        'description': vd.get('description', ''),
        'patient_id': vd.get('patientId'),
        'doctor_id': vd.get('doctorId'),
    }


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def surgery_list(request):
    return list_response(svc.list_surgeries(), SurgerySerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def surgery_detail(request, surgery_id):
    return Response(SurgerySerializer(svc.get_surgery(surgery_id)).data)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def surgeries_by_patient(request, patient_id):
    return list_response(svc.surgeries_by_patient(patient_id), SurgerySerializer)


@api_view(['POST'])
@permission_classes([IsAdminOrUser])
def surgery_create(request):
    vd = validated(SurgeryWriteSerializer, request.data)
    surgery = svc.create_surgery(**_fields(vd))
    return Response(SurgerySerializer(surgery).data, status=status.HTTP_201_CREATED)


@api_view(['PUT'])
@permission_classes([IsAdminRole])
def surgery_update(request, surgery_id):
    vd = validated(SurgeryWriteSerializer, request.data)
    surgery = svc.update_surgery(surgery_id, **_fields(vd))
    return Response(SurgerySerializer(surgery).data)


@api_view(['DELETE'])
@permission_classes([IsAdminRole])
def surgery_delete(request, surgery_id):
    svc.delete_surgery(surgery_id)
    return Response(status=status.HTTP_204_NO_CONTENT)
