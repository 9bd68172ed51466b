from typing import Optional
from dataclasses import dataclass, replace
from enum import Enum

from models.inputs import CalculatorType
from models.results import CalculatorResult
from models.tips import TipRequest, TipResponse


class ViewPhase(Enum):
    IDLE = "idle"
    COMPUTING = "computing"
    RESULT_READY = "result_ready"    # result shown, tips pending
    TIPS_READY = "tips_ready"
    TIP_FAILED = "tip_failed"


@dataclass(frozen=True)
class ViewState:
    """What the user currently sees.

    Every submission bumps ``generation``. Transitions that carry a
    generation other than the current one are stale and return the state
    unchanged, so a slow tip response cannot overwrite a newer calculation.
    """
    active_calculator: CalculatorType = CalculatorType.BMI
    phase: ViewPhase = ViewPhase.IDLE
    generation: int = 0
    result: Optional[CalculatorResult] = None
    tip_request: Optional[TipRequest] = None
    tips: Optional[TipResponse] = None
    tip_error: Optional[str] = None

    @property
    def is_loading_tips(self) -> bool:
        return self.phase == ViewPhase.RESULT_READY

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    def select_calculator(self, calculator_type: CalculatorType) -> "ViewState":
        """Switch tabs. Does not touch the last result or tips."""
        return replace(self, active_calculator=calculator_type)

    def begin(self, calculator_type: CalculatorType) -> "ViewState":
        """Submit: start a new generation and clear the previous outcome."""
        return ViewState(
            active_calculator=calculator_type,
            phase=ViewPhase.COMPUTING,
            generation=self.generation + 1,
        )

    def result_ready(self, generation: int, result: CalculatorResult, tip_request: TipRequest) -> "ViewState":
        if not self.is_current(generation):
            return self
        return replace(self, phase=ViewPhase.RESULT_READY, result=result, tip_request=tip_request)

    def tips_ready(self, generation: int, tips: TipResponse) -> "ViewState":
        if not self.is_current(generation):
            return self
        return replace(self, phase=ViewPhase.TIPS_READY, tips=tips, tip_error=None)

    def tips_failed(self, generation: int, error: str, tips: Optional[TipResponse] = None) -> "ViewState":
        if not self.is_current(generation):
            return self
        return replace(self, phase=ViewPhase.TIP_FAILED, tips=tips, tip_error=error)
