# apps/territories/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('', views.territory_list_view, name='territory_list'),
    path('new/', views.territory_create_view, name='territory_create'),
    path('<int:pk>/edit/', views.territory_edit_view, name='territory_edit'),
    path('<int:pk>/delete/', views.territory_delete_view, name='territory_delete'),
    path('requests/new/', views.assignment_request_create_view, name='assignment_request_create'),
    path('requests/<int:pk>/<str:decision>/', views.assignment_request_resolve_view,
         name='assignment_request_resolve'),
    path('accounts/', views.account_ownership_view, name='account_ownership'),
]
