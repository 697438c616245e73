import pytest

from apps.delivery.wizard import (
    WIZARD_SESSION_KEY,
    DeliveryWizard,
    SessionWizardStore,
    WizardState,
    WizardStep,
    WizardTransitionError,
    is_valid_otp,
)

BOOKING = {"_id": "b1", "bookingId": "BK-100", "status": "shipped"}


def test_forward_path_reaches_confirm():
    wizard = DeliveryWizard()
    assert wizard.step is WizardStep.SEARCH
    wizard.booking_found("BK-100", BOOKING)
    assert wizard.step is WizardStep.VERIFY
    assert wizard.state.booking_ref == "b1"
    wizard.otp_sent()
    assert wizard.step is WizardStep.CONFIRM
    state = wizard.confirm_ready("1234", "Ravi", "99000")
    assert (state.otp, state.agent_name, state.agent_phone) == ("1234", "Ravi", "99000")


def test_steps_cannot_be_skipped():
    wizard = DeliveryWizard()
    with pytest.raises(WizardTransitionError) as exc:
        wizard.otp_sent()
    assert exc.value.step is WizardStep.SEARCH
    with pytest.raises(WizardTransitionError):
        wizard.confirm_ready("1234", "Ravi", "99000")


def test_back_clears_entered_details_and_keeps_booking():
    wizard = DeliveryWizard()
    wizard.booking_found("BK-100", BOOKING)
    wizard.otp_sent()
    wizard.confirm_ready("1234", "Ravi", "99000")

    state = wizard.back()
    assert state.step is WizardStep.VERIFY
    assert state.otp == "" and state.agent_name == "" and state.agent_phone == ""
    assert state.booking == BOOKING

    assert wizard.back().step is WizardStep.SEARCH
    assert wizard.back().step is WizardStep.SEARCH


def test_reset_returns_to_empty_search():
    wizard = DeliveryWizard()
    wizard.booking_found("BK-100", BOOKING)
    state = wizard.reset()
    assert state == WizardState()


def test_state_survives_session_round_trip():
    session = {}
    store = SessionWizardStore(session)
    wizard = store.load()
    wizard.booking_found("BK-100", BOOKING)
    store.save(wizard)
    assert session[WIZARD_SESSION_KEY]["step"] == "verify"

    restored = SessionWizardStore(session).load()
    assert restored.step is WizardStep.VERIFY
    assert restored.state.booking == BOOKING


@pytest.mark.parametrize(
    "raw",
    [None, "garbage", {"step": "teleport"}, {"step": "confirm", "booking": None}],
)
def test_unusable_session_state_starts_over(raw):
    assert WizardState.from_dict(raw) == WizardState()


def test_store_clear_removes_key():
    session = {WIZARD_SESSION_KEY: {"step": "search"}}
    SessionWizardStore(session).clear()
    assert WIZARD_SESSION_KEY not in session


@pytest.mark.parametrize(
    "otp,digits,expected",
    [("1234", 4, True), ("123", 4, False), ("12a4", 4, False), ("123456", 6, True), (1234, 4, False)],
)
def test_is_valid_otp(otp, digits, expected):
    assert is_valid_otp(otp, digits) is expected
