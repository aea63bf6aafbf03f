# apps/reports/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('activity/', views.activity_log_view, name='activity_log'),
    path('api/temperature-correction/', views.temperature_correction_api_view, name='temperature_correction_api'),
]
