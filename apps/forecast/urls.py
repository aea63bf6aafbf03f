# apps/forecast/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('api/revenue/', views.revenue_forecast_api_view, name='revenue_forecast_api'),
]
