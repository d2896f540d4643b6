from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from core.permissions import IsAdminOrUser, IsAdminRole
from core.serializers.hospital import HospitalSerializer, HospitalWriteSerializer
from core.services import hospitals as svc
from core.views.common import list_response, validated


def _fields(vd):
    return {
        'name': vd['hospitalName'],
        'address': vd.get('address', ''),
        'city': vd.get('city', ''),
        'ward_ids': vd.get('wardIds'),
    }


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def hospital_list(request):
    return list_response(svc.list_hospitals(), HospitalSerializer)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def hospital_detail(request, hospital_id):
    return Response(HospitalSerializer(svc.get_hospital(hospital_id)).data)


@api_view(['GET'])
@permission_classes([IsAdminOrUser])
def hospitals_by_city(request, city):
    return list_response(svc.hospitals_by_city(city), HospitalSerializer)


@api_view(['POST'])
@permission_classes([IsAdminRole])
def hospital_create(request):
    """Create a hospital; ``wardIds`` sets its initial ward set."""
    vd = validated(HospitalWriteSerializer, request.data)
    hospital = svc.create_hospital(**_fields(vd))
    return Response(HospitalSerializer(hospital).data, status=status.HTTP_201_CREATED)


@api_view(['PUT'])
@permission_classes([IsAdminRole])
def hospital_update(request, hospital_id):
    """Replace name/address/city.  A non-empty ``wardIds`` replaces the ward set."""
    vd = validated(HospitalWriteSerializer, request.data)
    hospital = svc.update_hospital(hospital_id, **_fields(vd))
    return Response(HospitalSerializer(hospital).data)


@api_view(['DELETE'])
@permission_classes([IsAdminRole])
def hospital_delete(request, hospital_id):
    svc.delete_hospital(hospital_id)
    return Response(status=status.HTTP_204_NO_CONTENT)
