from django.urls import path
from .views import home, AboutView, ServicesView, ServiceDetailView, ContactView

urlpatterns = [
    path('', home, name='home'),
    path('about/', AboutView.as_view(), name='about'),
    path('services/', ServicesView.as_view(), name='services'),
    path('services/<slug:slug>/', ServiceDetailView.as_view(), name='service-detail'),
    path('contact/', ContactView.as_view(), name='contact'),
]
