from django.urls import path
from .views import ConsultantListView, ConsultantDetailView

urlpatterns = [
    path('', ConsultantListView.as_view(), name='consultant-list'),
    path('<slug:consultant_id>/', ConsultantDetailView.as_view(), name='consultant-detail'),
]
