import unittest
from unittest.mock import Mock, patch

from rest_framework.test import APIRequestFactory

from apps.api.exceptions import ApplicationError
from apps.delivery.views import (
    DeliveryOtpLoginView,
    DeliveryWizardView,
    OrderTrackingView,
    WizardConfirmView,
    WizardSearchView,
    WizardSendOtpView,
)
from apps.delivery.wizard import WizardState, WizardStep
from apps.gateway.credentials import DELIVERY, DELIVERY_TOKEN_KEY, PROFILE_KEYS


def agent_session():
    return {DELIVERY_TOKEN_KEY: "jwt", PROFILE_KEYS[DELIVERY]: {"id": "d1", "name": "Ravi"}}


class DeliveryViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()

    def call(self, view_cls, request, service, session=None):
        request.session = session if session is not None else agent_session()
        with patch.object(view_cls, "service_factory", Mock(return_value=service)):
            return view_cls.as_view()(request)

    def test_wizard_requires_agent_login(self):
        request = self.factory.get("/api/delivery/wizard/")
        response = self.call(DeliveryWizardView, request, Mock(), session={})
        self.assertEqual(response.status_code, 401)

    def test_wizard_state_hides_otp(self):
        service = Mock()
        service.current.return_value = WizardState(
            step=WizardStep.CONFIRM, search_term="BK-1", booking={"_id": "b1"}, otp="1234"
        )
        response = self.call(DeliveryWizardView, self.factory.get("/api/delivery/wizard/"), service)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, {"step": "confirm", "searchTerm": "BK-1", "booking": {"_id": "b1"}})

    def test_search_returns_verify_state(self):
        service = Mock()
        service.search.return_value = WizardState(
            step=WizardStep.VERIFY, search_term="BK-1", booking={"_id": "b1"}
        )
        request = self.factory.post("/api/delivery/wizard/search/", {"searchTerm": "BK-1"}, format="json")
        response = self.call(WizardSearchView, request, service)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["step"], "verify")
        service.search.assert_called_once_with("BK-1")

    def test_out_of_order_step_is_conflict(self):
        service = Mock()
        service.send_customer_otp.side_effect = ApplicationError(
            "CONFLICT", "Cannot send the customer OTP while on the search step",
            details={"step": "search"},
        )
        request = self.factory.post("/api/delivery/wizard/send-otp/", {}, format="json")
        response = self.call(WizardSendOtpView, request, service)
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.data["error"]["code"], "CONFLICT")

    def test_confirm_returns_reset_wizard(self):
        service = Mock()
        service.confirm.return_value = {"detail": "Delivered", "booking": {"_id": "b1"}}
        service.current.return_value = WizardState()
        request = self.factory.post(
            "/api/delivery/wizard/confirm/",
            {"otp": "1234", "deliveryBoyName": "Ravi", "deliveryBoyPhone": "99000"},
            format="json",
        )
        response = self.call(WizardConfirmView, request, service)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["detail"], "Delivered")
        self.assertEqual(response.data["wizard"]["step"], "search")

    def test_otp_login_is_public(self):
        service = Mock()
        service.verify_otp.return_value = {"id": "d1", "name": "Ravi", "email": "ravi@example.com"}
        request = self.factory.post(
            "/api/delivery/auth/verify-otp/",
            {"email": "ravi@example.com", "otp": "123456"},
            format="json",
        )
        response = self.call(DeliveryOtpLoginView, request, service, session={})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["id"], "d1")

    def test_tracking_is_public(self):
        service = Mock()
        service.track.return_value = {"bookingId": "BK-1", "status": "shipped"}
        request = self.factory.get("/api/delivery/track/", {"searchTerm": "BK-1"})
        request.session = {}
        with patch.object(OrderTrackingView, "service_factory", Mock(return_value=service)):
            response = OrderTrackingView.as_view()(request)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["booking"]["status"], "shipped")
        service.track.assert_called_once_with("BK-1")
