from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from core.permissions import IsAdminOrUser, IsAdminRole
from core.serializers.clinical import PrescriptionSerializer, PrescriptionWriteSerializer
from core.services import prescriptions as svc
from core.views.common import list_response, validated


def _fields(vd):
    return {
        'start_date': vd['startDate'],
        'end_date': vd.get('endDate'),
        'patient_id': vd.get('patientId'),
        'doctor_id': vd.get('doctorId'),
        'medication_id': vd.get('medicationId'),
    }


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def prescription_list(request):
    return list_response(svc.list_prescriptions(), PrescriptionSerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def prescription_detail(request, prescription_id):
    return Response(PrescriptionSerializer(svc.get_prescription(prescription_id)).data)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def prescriptions_by_patient(request, patient_id):
    return list_response(svc.prescriptions_by_patient(patient_id), PrescriptionSerializer)


@api_view(['POST'])
@permission_classes([IsAdminOrUser])
def prescription_create(request):
    vd = validated(PrescriptionWriteSerializer, request.data)
    prescription = svc.create_prescription(**_fields(vd))
    return Response(PrescriptionSerializer(prescription).data, status=status.HTTP_201_CREATED)


@api_view(['PUT'])
@permission_classes([IsAdminRole])
def prescription_update(request, prescription_id):
    vd = validated(PrescriptionWriteSerializer, request.data)
    prescription = svc.update_prescription(prescription_id, **_fields(vd))
    return Response(PrescriptionSerializer(prescription).data)


@api_view(['DELETE'])
@permission_classes([IsAdminRole])
def prescription_delete(request, prescription_id):
    svc.delete_prescription(prescription_id)
    return Response(status=status.HTTP_204_NO_CONTENT)
