# mealprep/urls.py
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    # Django Admin
    path('admin/', admin.site.urls),

    # ============ API ENDPOINTS ============
    # Every app registers its own prefix (no trailing slash) under /api/
    path('api/', include('accounts.urls')),
    path('api/', include('locations.urls')),
    path('api/', include('taxonomy.urls')),
    path('api/', include('ingredients.urls')),
    path('api/', include('menu.urls')),
    path('api/', include('customers.urls')),
    path('api/', include('orders.urls')),
    path('api/', include('core.urls')),
]

# Admin site customization
admin.site.site_header = "Meal Prep Operations Admin"
admin.site.site_title = "Meal Prep Admin"
admin.site.index_title = "Welcome to the Meal Prep Dashboard"
