from accounts.permissions import IsManagerOrReadOnly
from core.viewsets import EnvelopeModelViewSet

from .models import FoodCategory, FoodType, Specification, CookType
from .serializers import (
    FoodCategorySerializer, FoodTypeSerializer,
    SpecificationSerializer, CookTypeSerializer
)


class FoodCategoryViewSet(EnvelopeModelViewSet):
    """Food categories in display order (ties by creation time)"""
    queryset = FoodCategory.objects.order_by('display_order', 'created_at', 'id')
    serializer_class = FoodCategorySerializer
    permission_classes = [IsManagerOrReadOnly]


class FoodTypeViewSet(EnvelopeModelViewSet):
    serializer_class = FoodTypeSerializer
    permission_classes = [IsManagerOrReadOnly]

    def get_queryset(self):
        queryset = FoodType.objects.select_related('category')

        category_id = self.request.query_params.get('category_id')
        if category_id:
            queryset = queryset.filter(category_id=category_id)

        return queryset


class SpecificationViewSet(EnvelopeModelViewSet):
    serializer_class = SpecificationSerializer
    permission_classes = [IsManagerOrReadOnly]

    def get_queryset(self):
        queryset = Specification.objects.select_related('food_type__category')

        food_type_id = self.request.query_params.get('food_type_id')
        if food_type_id:
            queryset = queryset.filter(food_type_id=food_type_id)

        category_id = self.request.query_params.get('category_id')
        if category_id:
            queryset = queryset.filter(food_type__category_id=category_id)

        return queryset


class CookTypeViewSet(EnvelopeModelViewSet):
    serializer_class = CookTypeSerializer
    permission_classes = [IsManagerOrReadOnly]

    def get_queryset(self):
        queryset = CookType.objects.select_related('category')

        category_id = self.request.query_params.get('category_id')
        if category_id:
            queryset = queryset.filter(category_id=category_id)

        return queryset
