"""Tip service request/response models."""
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field

DEFAULT_DISCLAIMER = (
    "These tips are for informational purposes only and not a substitute for "
    "professional medical advice. Consult a healthcare provider for personalized guidance."
)
ERROR_TIP = "An error occurred while generating tips. Please try again."


class MalformedTipResponseError(ValueError):
    """The tip service answered, but not with {healthTips: [...], disclaimer?}."""


@dataclass(frozen=True)
class TipRequest:
    calculator_type: str
    calculator_result: str
    user_data: Optional[str] = None

    def to_payload(self) -> Dict[str, str]:
        payload = {
            "calculatorType": self.calculator_type,
            "calculatorResult": self.calculator_result,
        }
        if self.user_data:
            payload["userData"] = self.user_data
        return payload


@dataclass(frozen=True)
class TipResponse:
    health_tips: List[str] = field(default_factory=list)
    disclaimer: str = DEFAULT_DISCLAIMER
    is_fallback: bool = False

    @classmethod
    def from_payload(cls, payload: Any) -> "TipResponse":
        """
        Build a response from the service's JSON payload.

        Blank tips are dropped; a missing or blank disclaimer is replaced
        with DEFAULT_DISCLAIMER.

        Raises:
            MalformedTipResponseError: payload is not a dict, or healthTips
                is missing, not a list of strings, or has no usable tips.
        """
        if not isinstance(payload, dict):
            raise MalformedTipResponseError(f"Expected a JSON object, got {type(payload).__name__}")

        tips = payload.get("healthTips")
        if not isinstance(tips, list) or not all(isinstance(t, str) for t in tips):
            raise MalformedTipResponseError("healthTips must be a list of strings")
        tips = [t.strip() for t in tips if t.strip()]
        if not tips:
            raise MalformedTipResponseError("healthTips is empty")

        disclaimer = payload.get("disclaimer")
        if not isinstance(disclaimer, str) or not disclaimer.strip():
            disclaimer = DEFAULT_DISCLAIMER

        return cls(health_tips=tips, disclaimer=disclaimer.strip())

    @classmethod
    def fallback(cls) -> "TipResponse":
        return cls(health_tips=[ERROR_TIP], disclaimer=DEFAULT_DISCLAIMER, is_fallback=True)

    def to_payload(self) -> Dict[str, Any]:
        return {"healthTips": list(self.health_tips), "disclaimer": self.disclaimer}
