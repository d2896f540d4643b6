from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from core.permissions import IsAdminOrUser, IsAdminRole
from core.serializers.clinical import MedicationSerializer, MedicationWriteSerializer
from core.services import medications as svc
from core.views.common import list_response, validated


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def medication_list(request):
    return list_response(svc.list_medications(), MedicationSerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def medication_detail(request, medication_id):
    return Response(MedicationSerializer(svc.get_medication(medication_id)).data)


@api_view(['POST'])
@permission_classes([IsAdminOrUser])
def medication_create(request):
    vd = validated(MedicationWriteSerializer, request.data)
    medication = svc.create_medication(name=vd['medicationName'], dosage=vd.get('dosage', ''))
    return Response(MedicationSerializer(medication).data, status=status.HTTP_201_CREATED)


@api_view(['PUT'])
@permission_classes([IsAdminRole])
def medication_update(request, medication_id):
    vd = validated(MedicationWriteSerializer, request.data)
    medication = svc.update_medication(medication_id, name=vd['medicationName'], dosage=vd.get('dosage', ''))
    return Response(MedicationSerializer(medication).data)


@api_view(['DELETE'])
@permission_classes([IsAdminRole])
def medication_delete(request, medication_id):
    svc.delete_medication(medication_id)
    return Response(status=status.HTTP_204_NO_CONTENT)
