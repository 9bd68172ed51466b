"""HealthCalc Data Models.

This module contains the dataclasses passed between calculators, the tip
service and the view.

Models:
    BmiInput ... WaterIntakeInput: Validated per-calculator inputs.
    BmiResult ... WaterIntakeResult: Per-calculator result variants.
    TipRequest / TipResponse: Tip service payloads.
    ViewState: Immutable view state with generation-guarded transitions.
"""
from models.inputs import (
    UnitSystem,
    Gender,
    ActivityLevel,
    CalculatorType,
    InputErrorCode,
    FieldError,
    InvalidInputError,
    ParseResult,
    CalculatorInput,
    BmiInput,
    CalorieInput,
    HeartRateInput,
    BodyFatInput,
    IdealWeightInput,
    WhrInput,
    WaterIntakeInput,
    INPUT_TYPES,
)
from models.results import (
    BmiResult,
    CalorieResult,
    HeartRateResult,
    BodyFatResult,
    IdealWeightResult,
    WhrResult,
    WaterIntakeResult,
    CalculatorResult,
)
from models.tips import (
    DEFAULT_DISCLAIMER,
    ERROR_TIP,
    MalformedTipResponseError,
    TipRequest,
    TipResponse,
)
from models.view_state import ViewPhase, ViewState

__all__ = [
    "UnitSystem",
    "Gender",
    "ActivityLevel",
    "CalculatorType",
    "InputErrorCode",
    "FieldError",
    "InvalidInputError",
    "ParseResult",
    "CalculatorInput",
    "BmiInput",
    "CalorieInput",
    "HeartRateInput",
    "BodyFatInput",
    "IdealWeightInput",
    "WhrInput",
    "WaterIntakeInput",
    "INPUT_TYPES",
    "BmiResult",
    "CalorieResult",
    "HeartRateResult",
    "BodyFatResult",
    "IdealWeightResult",
    "WhrResult",
    "WaterIntakeResult",
    "CalculatorResult",
    "DEFAULT_DISCLAIMER",
    "ERROR_TIP",
    "MalformedTipResponseError",
    "TipRequest",
    "TipResponse",
    "ViewPhase",
    "ViewState",
]
