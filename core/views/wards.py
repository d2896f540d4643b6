from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from core.permissions import IsAdminOrUser, IsAdminRole
from core.serializers.hospital import WardSerializer, WardWriteSerializer
from core.services import wards as svc
from core.views.common import list_response, validated


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def ward_list(request):
    return list_response(svc.list_wards(), WardSerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def ward_detail(request, ward_id):
    return Response(WardSerializer(svc.get_ward(ward_id)).data)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def wards_by_type(request, ward_type):
    return list_response(svc.wards_by_type(ward_type), WardSerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def wards_by_hospital(request, hospital_id):
    return list_response(svc.wards_by_hospital(hospital_id), WardSerializer)


@api_view(['POST'])
@permission_classes([IsAdminRole])
def ward_create(request):
    vd = validated(WardWriteSerializer, request.data)
    ward = svc.create_ward(type=vd['type'], max_capacity=vd['maxCapacity'])
    return Response(WardSerializer(ward).data, status=status.HTTP_201_CREATED)


@api_view(['PUT'])
@permission_classes([IsAdminRole])
def ward_update(request, ward_id):
    vd = validated(WardWriteSerializer, request.data)
    ward = svc.update_ward(ward_id, type=vd['type'], max_capacity=vd['maxCapacity'])
    return Response(WardSerializer(ward).data)


@api_view(['DELETE'])
@permission_classes([IsAdminRole])
def ward_delete(request, ward_id):
    svc.delete_ward(ward_id)
    return Response(status=status.HTTP_204_NO_CONTENT)
