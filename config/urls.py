from django.contrib import admin
from django.urls import path, include

from apps.core.views import health

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/health/', health, name='health'),
    path('api/', include('apps.stores.api.urls')),
    path('api/stores/<uuid:store_id>/', include('apps.catalog.api.urls')),
    path('api/stores/<uuid:store_id>/', include('apps.sales.api.urls')),
]
