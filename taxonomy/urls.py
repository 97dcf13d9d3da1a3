from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

router = DefaultRouter(trailing_slash=False)
router.register(r'settings/categories', views.FoodCategoryViewSet, basename='food-category')
router.register(r'settings/types', views.FoodTypeViewSet, basename='food-type')
router.register(r'settings/specifications', views.SpecificationViewSet,
                basename='specification')
router.register(r'settings/cook-types', views.CookTypeViewSet, basename='cook-type')

urlpatterns = [
    path('', include(router.urls)),
]
