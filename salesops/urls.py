# salesops/urls.py
from django.contrib import admin
from django.urls import path, include
from apps.core import views as core_views


urlpatterns = [
    path('admin/', admin.site.urls),
    path('', core_views.dashboard_view, name='home'), # Pusta ścieżka = Home
    path('goals/', include('apps.goals.urls')),
    path('territories/', include('apps.territories.urls')),
    path('forecast/', include('apps.forecast.urls')),
    path('reports/', include('apps.reports.urls')),
]
