from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

router = DefaultRouter(trailing_slash=False)
router.register(r'users', views.UserViewSet, basename='user')

urlpatterns = [
    # Authentication
    path('users/login', views.login_view, name='login'),
    path('users/me', views.me_view, name='me'),

    # User management
    path('', include(router.urls)),
]
