from django.urls import path

from .views import (
    AdminBookingCancelView,
    AdminBookingListView,
    AdminBookingStatusView,
    AdminCustomerListView,
    AdminLogoutView,
    AdminOtpLoginView,
    AdminOtpRequestView,
    AdminProductDetailView,
    AdminProductListView,
    AdminProductVisibilityView,
    AdminProfileView,
    DashboardSummaryView,
    DeliveryStaffListView,
    DeliveryStaffStatusView,
)

urlpatterns = [
    path('auth/request-otp/', AdminOtpRequestView.as_view(), name='api-admin-request-otp'),
    path('auth/verify-otp/', AdminOtpLoginView.as_view(), name='api-admin-verify-otp'),
    path('auth/logout/', AdminLogoutView.as_view(), name='api-admin-logout'),
    path('auth/me/', AdminProfileView.as_view(), name='api-admin-me'),
    path('summary/', DashboardSummaryView.as_view(), name='api-admin-summary'),
    path('products/', AdminProductListView.as_view(), name='api-admin-products'),
    path('products/<str:product_id>/', AdminProductDetailView.as_view(), name='api-admin-product-detail'),
    path(
        'products/<str:product_id>/visibility/',
        AdminProductVisibilityView.as_view(),
        name='api-admin-product-visibility',
    ),
    path('bookings/', AdminBookingListView.as_view(), name='api-admin-bookings'),
    path('bookings/<str:booking_id>/status/', AdminBookingStatusView.as_view(), name='api-admin-booking-status'),
    path('bookings/<str:booking_id>/cancel/', AdminBookingCancelView.as_view(), name='api-admin-booking-cancel'),
    path('customers/', AdminCustomerListView.as_view(), name='api-admin-customers'),
    path('delivery-staff/', DeliveryStaffListView.as_view(), name='api-admin-delivery-staff'),
    path(
        'delivery-staff/<str:staff_id>/activate/',
        DeliveryStaffStatusView.as_view(active=True),
        name='api-admin-delivery-staff-activate',
    ),
    path(
        'delivery-staff/<str:staff_id>/deactivate/',
        DeliveryStaffStatusView.as_view(active=False),
        name='api-admin-delivery-staff-deactivate',
    ),
]
