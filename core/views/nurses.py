from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from core.permissions import IsAdminOrUser, IsAdminRole
from core.serializers.staff import NurseSerializer, NurseWriteSerializer
from core.services import nurses as svc
from core.views.common import list_response, validated


def _fields(vd):
    return {
        'name': vd['nurseName'],
        'speciality': vd['speciality'],
        'ward_id': vd.get('wardId'),
        'hospital_id': vd.get('hospitalId'),
    }


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def nurse_list(request):
    return list_response(svc.list_nurses(), NurseSerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def nurse_detail(request, nurse_id):
    return Response(NurseSerializer(svc.get_nurse(nurse_id)).data)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def nurses_by_ward(request, ward_id):
    return list_response(svc.nurses_by_ward(ward_id), NurseSerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def nurses_by_hospital(request, hospital_id):
    return list_response(svc.nurses_by_hospital(hospital_id), NurseSerializer)


@api_view(['POST'])
@permission_classes([IsAdminRole])
def nurse_create(request):
    vd = validated(NurseWriteSerializer, request.data)
    nurse = svc.create_nurse(**_fields(vd))
    return Response(NurseSerializer(nurse).data, status=status.HTTP_201_CREATED)


@api_view(['PUT'])
@permission_classes([IsAdminRole])
def nurse_update(request, nurse_id):
    vd = validated(NurseWriteSerializer, request.data)
    nurse = svc.update_nurse(nurse_id, **_fields(vd))
    return Response(NurseSerializer(nurse).data)


@api_view(['DELETE'])
@permission_classes([IsAdminRole])
def nurse_delete(request, nurse_id):
    svc.delete_nurse(nurse_id)
    return Response(status=status.HTTP_204_NO_CONTENT)
