from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.test import APIRequestFactory

from apps.api.exceptions import ApplicationError, global_exception_handler
from apps.gateway.exceptions import BackendError, BackendUnavailableError

factory = APIRequestFactory()


class DummyView:
    pass


def _context(request):
    return {"request": request, "view": DummyView()}


def test_application_error_returns_structured_response():
    request = factory.get("/api/example/")
    exc = ApplicationError(
        "CONFLICT",
        "Cannot confirm delivery while on the search step",
        status_code=status.HTTP_409_CONFLICT,
        details={"step": "search"},
    )
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_409_CONFLICT
    assert payload["code"] == "CONFLICT"
    assert payload["message"] == "Cannot confirm delivery while on the search step"
    assert payload["details"] == {"step": "search"}


def test_validation_error_preserves_details():
    request = factory.post("/api/example/", data={})
    exc = ValidationError({"field": ["This field is required."]})
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert payload["code"] == "VALIDATION_ERROR"
    assert payload["message"] == "Validation failed"
    assert payload["details"] == {"field": ["This field is required."]}


def test_unhandled_exception_returns_generic_message():
    request = factory.get("/api/example/")
    response = global_exception_handler(RuntimeError("boom"), _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert payload["code"] == "SERVER_ERROR"
    assert payload["message"] == "Something went wrong"
    assert "details" not in payload



def test_application_error_status_follows_code():
    request = factory.get("/api/example/")
    response = global_exception_handler(ApplicationError("UNAUTHORIZED", "Please login"), _context(request))
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_backend_client_error_is_relayed_verbatim():
    request = factory.post("/api/checkout/cod/")
    exc = BackendError("Product out of stock", 400, {"success": False, "message": "Product out of stock"})
    response = global_exception_handler(exc, _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert payload["message"] == "Product out of stock"
    assert payload["details"]["success"] is False


def test_backend_server_error_becomes_bad_gateway():
    request = factory.get("/api/products/")
    response = global_exception_handler(BackendError("HTTP Error 500", 500, "trace"), _context(request))
    payload = response.data["error"]
    assert response.status_code == status.HTTP_502_BAD_GATEWAY
    assert payload["code"] == "BAD_GATEWAY"
    assert "details" not in payload


def test_unreachable_backend_is_service_unavailable():
    request = factory.get("/api/products/")
    exc = BackendUnavailableError("Backend service is unreachable", url="http://backend/api/products")
    response = global_exception_handler(exc, _context(request))
    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert response.data["error"]["code"] == "SERVICE_UNAVAILABLE"
