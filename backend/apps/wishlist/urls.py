from django.urls import path

from .views import (
    WishlistAddToCartView,
    WishlistItemDetailView,
    WishlistItemListView,
    WishlistToggleView,
    WishlistView,
)

urlpatterns = [
    path("", WishlistView.as_view(), name="api-wishlist"),
    path("items/", WishlistItemListView.as_view(), name="api-wishlist-items"),
    path("items/<str:product_slug>/", WishlistItemDetailView.as_view(), name="api-wishlist-item-detail"),
    path(
        "items/<str:product_slug>/add-to-cart/",
        WishlistAddToCartView.as_view(),
        name="api-wishlist-item-add-to-cart",
    ),
    path("toggle/", WishlistToggleView.as_view(), name="api-wishlist-toggle"),
]
