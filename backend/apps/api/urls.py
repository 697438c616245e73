from django.urls import path, include

urlpatterns = [
    path("", include("apps.catalog.urls")),
    path("cart/", include("apps.carts.urls")),
    path("wishlist/", include("apps.wishlist.urls")),
    path("auth/", include("apps.accounts.urls")),
    path("checkout/", include("apps.checkout.urls")),
    path("delivery/", include("apps.delivery.urls")),
    path("admin/", include("apps.dashboard.urls")),
    path("pages/", include("apps.pages.urls")),
]
