# apps/goals/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('', views.goal_list_view, name='goal_list'),
    path('new/', views.goal_create_view, name='goal_create'),
    path('dashboard/', views.goal_dashboard_view, name='goal_dashboard'),
    path('<int:pk>/edit/', views.goal_edit_view, name='goal_edit'),
    path('<int:pk>/delete/', views.goal_delete_view, name='goal_delete'),
    path('<int:pk>/progress/', views.goal_progress_api_view, name='goal_progress_api'),
    path('api/forecast/', views.goal_forecast_api_view, name='goal_forecast_api'),
    path('api/notifications/', views.goal_notifications_api_view, name='goal_notifications_api'),
]
