from django.urls import path

from .views import (
    GoogleLoginView,
    LoginView,
    LogoutView,
    MyOrdersView,
    ProfileView,
    RegisterView,
    VerifyEmailView,
)

urlpatterns = [
    path('register/', RegisterView.as_view(), name='api-auth-register'),
    path('login/', LoginView.as_view(), name='api-auth-login'),
    path('google/', GoogleLoginView.as_view(), name='api-auth-google'),
    path('logout/', LogoutView.as_view(), name='api-auth-logout'),
    path('verify-email/', VerifyEmailView.as_view(), name='api-auth-verify-email'),
    path('profile/', ProfileView.as_view(), name='api-auth-profile'),
    path('orders/', MyOrdersView.as_view(), name='api-auth-orders'),
]
