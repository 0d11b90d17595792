from django.urls import path
from . import views

urlpatterns = [
    path('', views.district_list, name='district_list'),
    path('api/', views.district_list_api, name='district_list_api'),
    path('suggest/', views.suggest_district, name='suggest_district'),
]
