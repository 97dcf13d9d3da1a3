from django.db.models import Q
from rest_framework.decorators import action

from accounts.permissions import IsStaffOrHigher
from core.responses import success_response
from core.viewsets import EnvelopeModelViewSet, get_required_param

from .business_logic import MenuBusinessLogic
from .models import MenuItem
from .serializers import MenuItemSerializer, MenuItemWriteSerializer


class MenuItemViewSet(EnvelopeModelViewSet):
    """Menu items of one location; listing requires ?location_id="""
    permission_classes = [IsStaffOrHigher]
    read_serializer_class = MenuItemSerializer

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return MenuItemWriteSerializer
        return MenuItemSerializer

    def get_queryset(self):
        queryset = MenuItem.objects.select_related(
            'location', 'food_category', 'food_type', 'specification', 'cook_type'
        ).prefetch_related(
            'photos', 'ingredients__ingredient__food_type', 'ingredients__ingredient_quantity'
        )

        if self.action != 'list':
            return queryset

        location_id = get_required_param(self.request, 'location_id')
        queryset = queryset.filter(location_id=location_id)

        status_filter = self.request.query_params.get('status')
        if status_filter:
            queryset = queryset.filter(status=status_filter)

        category_id = self.request.query_params.get('category_id')
        if category_id:
            queryset = queryset.filter(food_category_id=category_id)

        search = self.request.query_params.get('search')
        if search:
            queryset = queryset.filter(
                Q(name__icontains=search) |
                Q(display_id__icontains=search) |
                Q(tags__icontains=search)
            )

        return queryset

    @action(detail=True, methods=['patch'], url_path='toggle-status')
    def toggle_status(self, request, pk=None):
        """Flip a menu item between draft and active"""
        menu_item = MenuBusinessLogic.toggle_status(self.get_object())
        return success_response(
            MenuItemSerializer(menu_item).data,
            message=f'Menu item is now {menu_item.status}'
        )
