"""Delivery confirmation wizard.

A linear state machine ``SEARCH -> VERIFY -> CONFIRM`` driven by the delivery
agent. Each forward transition happens only after the backend accepted the
step; the state lives in the agent's session between requests.
"""
import re
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Optional

DELIVERY_OTP_DIGITS = 4
LOGIN_OTP_DIGITS = 6


class WizardStep(str, Enum):
    SEARCH = "search"
    VERIFY = "verify"
    CONFIRM = "confirm"


class WizardTransitionError(Exception):
    def __init__(self, message: str, step: WizardStep):
        super().__init__(message)
        self.message = message
        self.step = step


def is_valid_otp(otp: Any, digits: int) -> bool:
    return isinstance(otp, str) and re.fullmatch(rf"\d{{{digits}}}", otp) is not None


@dataclass
class WizardState:
    step: WizardStep = WizardStep.SEARCH
    search_term: str = ""
    booking: Optional[Dict[str, Any]] = None
    otp: str = ""
    agent_name: str = ""
    agent_phone: str = ""

    @property
    def booking_ref(self) -> Optional[str]:
        if not self.booking:
            return None
        ref = self.booking.get("_id")
        return str(ref) if ref else None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["step"] = self.step.value
        return data

    @classmethod
    def from_dict(cls, raw: Any) -> "WizardState":
        if not isinstance(raw, dict):
            return cls()
        try:
            step = WizardStep(raw.get("step", WizardStep.SEARCH.value))
        except ValueError:
            return cls()
        booking = raw.get("booking")
        state = cls(
            step=step,
            search_term=str(raw.get("search_term") or ""),
            booking=booking if isinstance(booking, dict) else None,
            otp=str(raw.get("otp") or ""),
            agent_name=str(raw.get("agent_name") or ""),
            agent_phone=str(raw.get("agent_phone") or ""),
        )
        # A step past SEARCH without a booking cannot be resumed
        if state.step is not WizardStep.SEARCH and state.booking_ref is None:
            return cls()
        return state


class DeliveryWizard:
    def __init__(self, state: Optional[WizardState] = None):
        self.state = state or WizardState()

    @property
    def step(self) -> WizardStep:
        return self.state.step

    def require(self, step: WizardStep, action: str) -> None:
        if self.state.step is not step:
            raise WizardTransitionError(
                f"Cannot {action} while on the {self.state.step.value} step", self.state.step
            )

    def _clear_step_local(self) -> None:
        self.state.otp = ""
        self.state.agent_name = ""
        self.state.agent_phone = ""

    def booking_found(self, search_term: str, booking: Dict[str, Any]) -> WizardState:
        self.require(WizardStep.SEARCH, "search")
        self._clear_step_local()
        self.state.search_term = search_term
        self.state.booking = dict(booking)
        self.state.step = WizardStep.VERIFY
        return self.state

    def otp_sent(self) -> WizardState:
        self.require(WizardStep.VERIFY, "send the customer OTP")
        self.state.step = WizardStep.CONFIRM
        return self.state

    def confirm_ready(self, otp: str, agent_name: str, agent_phone: str) -> WizardState:
        self.require(WizardStep.CONFIRM, "confirm delivery")
        self.state.otp = otp
        self.state.agent_name = agent_name
        self.state.agent_phone = agent_phone
        return self.state

    def back(self) -> WizardState:
        """Step back one screen, dropping OTP and agent details but keeping the booking."""
        self._clear_step_local()
        if self.state.step is WizardStep.CONFIRM:
            self.state.step = WizardStep.VERIFY
        elif self.state.step is WizardStep.VERIFY:
            self.state.step = WizardStep.SEARCH
        return self.state

    def reset(self) -> WizardState:
        self.state = WizardState()
        return self.state


WIZARD_SESSION_KEY = "danl_delivery_wizard"


class SessionWizardStore:
    def __init__(self, session):
        self.session = session

    def load(self) -> DeliveryWizard:
        return DeliveryWizard(WizardState.from_dict(self.session.get(WIZARD_SESSION_KEY)))

    def save(self, wizard: DeliveryWizard) -> None:
        self.session[WIZARD_SESSION_KEY] = wizard.state.to_dict()

    def clear(self) -> None:
        self.session.pop(WIZARD_SESSION_KEY, None)


__all__ = [
    "DELIVERY_OTP_DIGITS",
    "LOGIN_OTP_DIGITS",
    "DeliveryWizard",
    "SessionWizardStore",
    "WizardState",
    "WizardStep",
    "WizardTransitionError",
    "is_valid_otp",
]
