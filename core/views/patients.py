from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from core.permissions import IsAdminOrUser, IsAdminRole
from core.serializers.patient import PatientSerializer, PatientWriteSerializer
from core.services import patients as svc
from core.views.common import list_response, validated


def _fields(vd):
    return {
        'name': vd['patientName'],
        'date_of_birth': vd['dateOfBirth'],
        'gender': vd.get('gender', ''),
        'ward_id': vd.get('wardId'),
        'hospital_id': vd.get('hospitalId'),
        'diagnosis_ids': vd.get('diagnosisIds'),
    }


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def patient_list(request):
    return list_response(svc.list_patients(), PatientSerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def patient_detail(request, patient_id):
    return Response(PatientSerializer(svc.get_patient(patient_id)).data)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def patients_by_ward(request, ward_id):
    return list_response(svc.patients_by_ward(ward_id), PatientSerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def patients_by_hospital(request, hospital_id):
    return list_response(svc.patients_by_hospital(hospital_id), PatientSerializer)


@api_view(['POST'])
@permission_classes([IsAdminOrUser])
def patient_create(request):
    vd = validated(PatientWriteSerializer, request.data)
    patient = svc.create_patient(**_fields(vd))
    return Response(PatientSerializer(patient).data, status=status.HTTP_201_CREATED)


@api_view(['PUT'])
@permission_classes([IsAdminRole])
def patient_update(request, patient_id):
    """Full replace.  Omitting ``diagnosisIds`` keeps the current diagnoses."""
    vd = validated(PatientWriteSerializer, request.data)
    patient = svc.update_patient(patient_id, **_fields(vd))
    return Response(PatientSerializer(patient).data)


@api_view(['DELETE'])
@permission_classes([IsAdminRole])
def patient_delete(request, patient_id):
    svc.delete_patient(patient_id)
    return Response(status=status.HTTP_204_NO_CONTENT)
