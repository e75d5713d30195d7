"""
URL configuration for the Gift Exchange project.

Public API under /api/, operator API under /admin/api/, Django's own
admin site under /django-admin/.
"""
from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from config.views import serve_frontend, health_check

urlpatterns = [
    # Health check (for Render)
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('django-admin/', admin.site.urls),
    path('admin/api/', include('apps.dashboard.urls')),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # API endpoints
    path('api/groups/', include('apps.groups.urls')),
    path('api/contact/', include('apps.contact.urls')),

    # Frontend pages
    path('', serve_frontend, name='home'),
    path('admin', serve_frontend, {'page': 'admin'}, name='admin-page'),

    # Old page names still linked from shared invitations
    path('christmas-gift-exchange.html', RedirectView.as_view(url='/', permanent=True)),
    path('christmas-gift-exchange-fixed.html', RedirectView.as_view(url='/', permanent=True)),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
