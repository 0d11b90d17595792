from django.urls import path
from . import views

urlpatterns = [
    path('', views.performance_dashboard, name='performance_dashboard'),
    path('district/<str:district_name>/', views.district_performance, name='district_performance'),
    path('compare/state-average/', views.state_average_comparison, name='state_average_comparison'),
    path('compare/districts/', views.district_comparison, name='district_comparison'),
]
