import logging

from django.contrib.auth import authenticate
from django.db.models import Q
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, authentication_classes
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import AllowAny, IsAuthenticated

from core.exceptions import ConflictError
from core.responses import success_response, error_response
from core.viewsets import EnvelopeModelViewSet, get_required_param

from .models import CustomUser
from .permissions import IsManagerOrReadOnly, has_role
from .serializers import UserSerializer, UserWriteSerializer, LoginSerializer
from .utils import create_jwt_token

logger = logging.getLogger(__name__)

# ============ Authentication Views ============


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login_view(request):
    """Login endpoint with JWT token generation"""
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    email = serializer.validated_data['email']
    password = serializer.validated_data['password']

    user = authenticate(request, email=email, password=password)

    if user is None:
        logger.warning(f"Failed login attempt for {email}")
        return error_response('Invalid credentials', status=status.HTTP_401_UNAUTHORIZED)

    if not user.can_sign_in:
        return error_response('Account is disabled', status=status.HTTP_401_UNAUTHORIZED)

    token = create_jwt_token(user)
    logger.info(f"User {user.email} signed in")

    return success_response({
        'token': token,
        'user': UserSerializer(user).data
    }, message='Login successful')


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def me_view(request):
    """Profile of the signed-in user"""
    return success_response(UserSerializer(request.user).data)


# ============ User Management ============


class UserViewSet(EnvelopeModelViewSet):
    """Staff accounts, always listed for one location"""
    queryset = CustomUser.objects.select_related('location')
    permission_classes = [IsManagerOrReadOnly]
    read_serializer_class = UserSerializer

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return UserWriteSerializer
        return UserSerializer

    def get_queryset(self):
        queryset = CustomUser.objects.select_related('location')
        if self.action != 'list':
            return queryset

        location_id = get_required_param(self.request, 'location_id')
        queryset = queryset.filter(location_id=location_id)

        search = self.request.query_params.get('search')
        if search:
            queryset = queryset.filter(
                Q(name__icontains=search) |
                Q(email__icontains=search) |
                Q(contact_number__icontains=search)
            )

        role = self.request.query_params.get('role')
        if role:
            queryset = queryset.filter(role=role)

        account_status = self.request.query_params.get('status')
        if account_status:
            queryset = queryset.filter(account_status=account_status)

        return queryset

    def perform_create(self, serializer):
        self.check_role_assignment(serializer.validated_data.get('role'))
        serializer.save()

    def perform_update(self, serializer):
        self.check_role_assignment(serializer.validated_data.get('role'))
        serializer.save()

    def check_role_assignment(self, role):
        """Only admins may hand out the admin role"""
        if role == 'admin' and not has_role(self.request.user, ['admin']):
            raise PermissionDenied('Only admins can assign the admin role.')

    def perform_destroy(self, instance):
        if instance == self.request.user:
            raise ConflictError('You cannot delete your own account.')
        instance.delete()
