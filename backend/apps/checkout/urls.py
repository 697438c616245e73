from django.urls import path

from .views import (
    CashOnDeliveryView,
    CheckoutSummaryView,
    PaymentOrderView,
    PaymentVerificationView,
)

urlpatterns = [
    path('', CheckoutSummaryView.as_view(), name='api-checkout'),
    path('cod/', CashOnDeliveryView.as_view(), name='api-checkout-cod'),
    path('payment-order/', PaymentOrderView.as_view(), name='api-checkout-payment-order'),
    path('verify-payment/', PaymentVerificationView.as_view(), name='api-checkout-verify-payment'),
]
