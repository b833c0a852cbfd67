from django.urls import path
from . import views

urlpatterns = [
    path('records', views.starship_list, name='starship_list'),
    path('records/create', views.starship_create, name='starship_create'),
    path('records/<int:pk>', views.starship_detail, name='starship_detail'),
    path('records/<int:pk>/edit', views.starship_edit, name='starship_edit'),
    path('records/<int:pk>/delete', views.starship_delete, name='starship_delete'),
]
