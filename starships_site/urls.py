from django.urls import include, path
from django.views.generic import RedirectView

urlpatterns = [
    path('', RedirectView.as_view(pattern_name='starship_list', permanent=False)),
    path('', include('starships.urls')),
]
