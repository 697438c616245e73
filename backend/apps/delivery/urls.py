from django.urls import path

from .views import (
    DeliveryAgentView,
    DeliveryEmailVerifyView,
    DeliveryLogoutView,
    DeliveryOtpLoginView,
    DeliveryOtpRequestView,
    DeliveryWizardView,
    OrderTrackingView,
    WizardBackView,
    WizardConfirmView,
    WizardResetView,
    WizardSearchView,
    WizardSendOtpView,
)

urlpatterns = [
    path('auth/request-otp/', DeliveryOtpRequestView.as_view(), name='api-delivery-request-otp'),
    path('auth/verify-otp/', DeliveryOtpLoginView.as_view(), name='api-delivery-verify-otp'),
    path('auth/verify-email/', DeliveryEmailVerifyView.as_view(), name='api-delivery-verify-email'),
    path('auth/logout/', DeliveryLogoutView.as_view(), name='api-delivery-logout'),
    path('auth/me/', DeliveryAgentView.as_view(), name='api-delivery-me'),
    path('wizard/', DeliveryWizardView.as_view(), name='api-delivery-wizard'),
    path('wizard/search/', WizardSearchView.as_view(), name='api-delivery-wizard-search'),
    path('wizard/send-otp/', WizardSendOtpView.as_view(), name='api-delivery-wizard-send-otp'),
    path('wizard/confirm/', WizardConfirmView.as_view(), name='api-delivery-wizard-confirm'),
    path('wizard/back/', WizardBackView.as_view(), name='api-delivery-wizard-back'),
    path('wizard/reset/', WizardResetView.as_view(), name='api-delivery-wizard-reset'),
    path('track/', OrderTrackingView.as_view(), name='api-delivery-track'),
]
