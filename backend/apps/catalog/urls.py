from django.urls import path

from .views import (
    CategoryProductsView,
    ProductDetailView,
    ProductListView,
    ProductSearchView,
)

urlpatterns = [
    path('products/', ProductListView.as_view(), name='api-products-list'),
    path('products/<str:slug>/', ProductDetailView.as_view(), name='api-products-detail'),
    path('search/', ProductSearchView.as_view(), name='api-products-search'),
    path('categories/<slug:slug>/', CategoryProductsView.as_view(), name='api-category-products'),
]
