from django.urls import path

from .views import ContactView, PageDetailView, PageListView

urlpatterns = [
    path('', PageListView.as_view(), name='api-pages'),
    path('contact/', ContactView.as_view(), name='api-pages-contact'),
    path('<slug:slug>/', PageDetailView.as_view(), name='api-pages-detail'),
]
