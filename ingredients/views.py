from rest_framework.decorators import action

from accounts.permissions import IsStaffOrHigher
from core.responses import success_response
from core.viewsets import EnvelopeModelViewSet
from taxonomy.serializers import FoodCategorySerializer

from .business_logic import IngredientBusinessLogic
from .filters import IngredientFilter
from .models import Ingredient
from .serializers import IngredientSerializer, IngredientWriteSerializer


class IngredientViewSet(EnvelopeModelViewSet):
    """Ingredients with their quantity/price schedules"""
    permission_classes = [IsStaffOrHigher]
    read_serializer_class = IngredientSerializer
    filterset_class = IngredientFilter

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return IngredientWriteSerializer
        return IngredientSerializer

    def get_queryset(self):
        return Ingredient.objects.select_related(
            'food_type__category', 'specification', 'cook_type'
        ).prefetch_related('quantities')

    @action(detail=False, methods=['get'], url_path='by-category')
    def by_category(self, request):
        """All ingredients grouped under their food category"""
        queryset = self.filter_queryset(self.get_queryset())
        groups = IngredientBusinessLogic.group_by_category(queryset)
        data = [
            {
                'category': FoodCategorySerializer(group['category']).data,
                'ingredients': IngredientSerializer(group['ingredients'], many=True).data,
            }
            for group in groups
        ]
        return success_response(data, count=len(data))
