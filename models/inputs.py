"""Typed calculator inputs.

Each calculator has its own frozen dataclass. Instances validate themselves
on construction (raising InvalidInputError), and ``parse()`` builds one from
raw form values, returning a ParseResult instead of raising.

Metric inputs are in cm / kg, imperial inputs in inches / lb.
"""
import math
from typing import Any, Callable, ClassVar, Dict, List, Optional, Tuple
from dataclasses import dataclass, field
from enum import Enum

from config.settings import AGE_MIN, AGE_MAX


class UnitSystem(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Activity tiers, ordered from least to most active."""
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


class CalculatorType(str, Enum):
    """Calculator names, as sent to the tip service."""
    BMI = "BMI"
    CALORIE = "Calorie Intake"
    HEART_RATE = "Target Heart Rate"
    BODY_FAT = "Body Fat %"
    IDEAL_WEIGHT = "Ideal Weight"
    WHR = "WHR"
    WATER_INTAKE = "Water Intake"


class InputErrorCode(Enum):
    REQUIRED = "required"
    NOT_A_NUMBER = "not_a_number"
    NOT_POSITIVE = "not_positive"
    NOT_AN_INTEGER = "not_an_integer"
    OUT_OF_RANGE = "out_of_range"
    INVALID_CHOICE = "invalid_choice"
    HIP_REQUIRED_FOR_FEMALE = "hip_required_for_female"
    INVALID_CIRCUMFERENCES = "invalid_circumferences"


@dataclass(frozen=True)
class FieldError:
    field: str
    code: InputErrorCode
    message: str


class InvalidInputError(ValueError):
    """Raised when a calculator input is constructed with invalid values."""

    def __init__(self, errors: List[FieldError]):
        self.errors = errors
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in errors))


@dataclass
class ParseResult:
    """Outcome of parsing raw form values: a valid input or field errors."""
    value: Optional["CalculatorInput"] = None
    errors: List[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors


# ============================================================================
# FIELD CHECKS
# ============================================================================

def _is_missing(raw: Any) -> bool:
    return raw is None or (isinstance(raw, str) and raw.strip() == "")


def _check_positive(name: str, value: Any) -> Optional[FieldError]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return FieldError(name, InputErrorCode.NOT_A_NUMBER, "Must be a number")
    if not math.isfinite(value):
        return FieldError(name, InputErrorCode.NOT_A_NUMBER, "Must be a number")
    if value <= 0:
        return FieldError(name, InputErrorCode.NOT_POSITIVE, "Must be a positive number")
    return None


def _check_age(name: str, value: Any) -> Optional[FieldError]:
    if isinstance(value, bool) or not isinstance(value, int):
        return FieldError(name, InputErrorCode.NOT_AN_INTEGER, "Must be a whole number")
    if value < AGE_MIN:
        return FieldError(name, InputErrorCode.OUT_OF_RANGE, f"Must be at least {AGE_MIN}")
    if value > AGE_MAX:
        return FieldError(name, InputErrorCode.OUT_OF_RANGE, "Age seems too high")
    return None


def _check_choice(name: str, value: Any, enum_cls) -> Optional[FieldError]:
    if not isinstance(value, enum_cls):
        choices = ", ".join(m.value for m in enum_cls)
        return FieldError(name, InputErrorCode.INVALID_CHOICE, f"Must be one of: {choices}")
    return None


# Coercers turn a raw form value into a typed value or a FieldError.
Coercer = Callable[[str, Any], Tuple[Any, Optional[FieldError]]]


def _number(name: str, raw: Any) -> Tuple[Any, Optional[FieldError]]:
    if _is_missing(raw):
        return None, FieldError(name, InputErrorCode.REQUIRED, "This field is required")
    try:
        value = float(raw)
    except (ValueError, TypeError):
        return None, FieldError(name, InputErrorCode.NOT_A_NUMBER, "Must be a number")
    return value, _check_positive(name, value)


def _optional_number(name: str, raw: Any) -> Tuple[Any, Optional[FieldError]]:
    if _is_missing(raw):
        return None, None
    return _number(name, raw)


def _age(name: str, raw: Any) -> Tuple[Any, Optional[FieldError]]:
    if _is_missing(raw):
        return None, FieldError(name, InputErrorCode.REQUIRED, "This field is required")
    try:
        number = float(raw)
    except (ValueError, TypeError):
        return None, FieldError(name, InputErrorCode.NOT_A_NUMBER, "Must be a number")
    if not number.is_integer():
        return None, FieldError(name, InputErrorCode.NOT_AN_INTEGER, "Must be a whole number")
    value = int(number)
    return value, _check_age(name, value)


def _choice(enum_cls, default=None) -> Coercer:
    def coerce(name: str, raw: Any) -> Tuple[Any, Optional[FieldError]]:
        if _is_missing(raw):
            if default is not None:
                return default, None
            return None, FieldError(name, InputErrorCode.REQUIRED, f"{name.replace('_', ' ').capitalize()} is required")
        if isinstance(raw, enum_cls):
            return raw, None
        try:
            return enum_cls(str(raw).strip().lower()), None
        except ValueError:
            return None, _check_choice(name, raw, enum_cls)
    return coerce


def _optional_choice(enum_cls) -> Coercer:
    def coerce(name: str, raw: Any) -> Tuple[Any, Optional[FieldError]]:
        if _is_missing(raw):
            return None, None
        return _choice(enum_cls)(name, raw)
    return coerce


_unit = _choice(UnitSystem, default=UnitSystem.METRIC)


# ============================================================================
# CALCULATOR INPUTS
# ============================================================================

class CalculatorInput:
    """Base for all calculator inputs."""
    calculator_type: ClassVar[CalculatorType]
    FIELDS: ClassVar[Dict[str, Coercer]] = {}

    def __post_init__(self):
        errors = self.validate()
        if errors:
            raise InvalidInputError(errors)

    def validate(self) -> List[FieldError]:
        raise NotImplementedError

    @classmethod
    def parse(cls, raw: Dict[str, Any]) -> ParseResult:
        """Coerce and validate raw form values (strings or numbers)."""
        values: Dict[str, Any] = {}
        errors: List[FieldError] = []
        for name, coerce in cls.FIELDS.items():
            value, error = coerce(name, raw.get(name))
            if error:
                errors.append(error)
            values[name] = value
        if errors:
            return ParseResult(errors=errors)
        try:
            return ParseResult(value=cls(**values))
        except InvalidInputError as e:
            return ParseResult(errors=e.errors)


def _collect(*errors: Optional[FieldError]) -> List[FieldError]:
    return [e for e in errors if e is not None]


@dataclass(frozen=True)
class BmiInput(CalculatorInput):
    calculator_type: ClassVar[CalculatorType] = CalculatorType.BMI
    FIELDS: ClassVar[Dict[str, Coercer]] = {"height": _number, "weight": _number, "unit": _unit}

    height: float
    weight: float
    unit: UnitSystem = UnitSystem.METRIC

    def validate(self) -> List[FieldError]:
        return _collect(
            _check_positive("height", self.height),
            _check_positive("weight", self.weight),
            _check_choice("unit", self.unit, UnitSystem),
        )


@dataclass(frozen=True)
class CalorieInput(CalculatorInput):
    calculator_type: ClassVar[CalculatorType] = CalculatorType.CALORIE
    FIELDS: ClassVar[Dict[str, Coercer]] = {
        "age": _age,
        "gender": _choice(Gender),
        "height": _number,
        "weight": _number,
        "activity_level": _choice(ActivityLevel),
        "unit": _unit,
    }

    age: int
    gender: Gender
    height: float
    weight: float
    activity_level: ActivityLevel
    unit: UnitSystem = UnitSystem.METRIC

    def validate(self) -> List[FieldError]:
        return _collect(
            _check_age("age", self.age),
            _check_choice("gender", self.gender, Gender),
            _check_positive("height", self.height),
            _check_positive("weight", self.weight),
            _check_choice("activity_level", self.activity_level, ActivityLevel),
            _check_choice("unit", self.unit, UnitSystem),
        )


@dataclass(frozen=True)
class HeartRateInput(CalculatorInput):
    calculator_type: ClassVar[CalculatorType] = CalculatorType.HEART_RATE
    FIELDS: ClassVar[Dict[str, Coercer]] = {"age": _age}

    age: int

    def validate(self) -> List[FieldError]:
        return _collect(_check_age("age", self.age))


@dataclass(frozen=True)
class BodyFatInput(CalculatorInput):
    """U.S. Navy method input. Hip is required for women and ignored for men."""
    calculator_type: ClassVar[CalculatorType] = CalculatorType.BODY_FAT
    FIELDS: ClassVar[Dict[str, Coercer]] = {
        "gender": _choice(Gender),
        "height": _number,
        "neck": _number,
        "waist": _number,
        "hip": _optional_number,
        "unit": _unit,
    }

    gender: Gender
    height: float
    neck: float
    waist: float
    hip: Optional[float] = None
    unit: UnitSystem = UnitSystem.METRIC

    def __post_init__(self):
        if self.gender == Gender.MALE and self.hip is not None:
            object.__setattr__(self, "hip", None)
        super().__post_init__()

    def validate(self) -> List[FieldError]:
        errors = _collect(
            _check_choice("gender", self.gender, Gender),
            _check_positive("height", self.height),
            _check_positive("neck", self.neck),
            _check_positive("waist", self.waist),
            _check_choice("unit", self.unit, UnitSystem),
        )
        if self.gender == Gender.FEMALE:
            if self.hip is None:
                errors.append(FieldError(
                    "hip", InputErrorCode.HIP_REQUIRED_FOR_FEMALE,
                    "Hip circumference is required and must be positive for females",
                ))
            else:
                errors.extend(_collect(_check_positive("hip", self.hip)))
        if errors:
            return errors

        # log10 in the Navy formula needs a positive argument
        if self.gender == Gender.MALE and self.waist <= self.neck:
            errors.append(FieldError(
                "waist", InputErrorCode.INVALID_CIRCUMFERENCES,
                "Waist must be larger than neck circumference",
            ))
        elif self.gender == Gender.FEMALE and self.waist + self.hip <= self.neck:
            errors.append(FieldError(
                "waist", InputErrorCode.INVALID_CIRCUMFERENCES,
                "Waist plus hip must be larger than neck circumference",
            ))
        return errors


@dataclass(frozen=True)
class IdealWeightInput(CalculatorInput):
    calculator_type: ClassVar[CalculatorType] = CalculatorType.IDEAL_WEIGHT
    FIELDS: ClassVar[Dict[str, Coercer]] = {"gender": _choice(Gender), "height": _number, "unit": _unit}

    gender: Gender
    height: float
    unit: UnitSystem = UnitSystem.METRIC

    def validate(self) -> List[FieldError]:
        return _collect(
            _check_choice("gender", self.gender, Gender),
            _check_positive("height", self.height),
            _check_choice("unit", self.unit, UnitSystem),
        )


@dataclass(frozen=True)
class WhrInput(CalculatorInput):
    """Waist and hip share a unit; gender is only needed for the risk label."""
    calculator_type: ClassVar[CalculatorType] = CalculatorType.WHR
    FIELDS: ClassVar[Dict[str, Coercer]] = {
        "waist": _number,
        "hip": _number,
        "gender": _optional_choice(Gender),
        "unit": _unit,
    }

    waist: float
    hip: float
    gender: Optional[Gender] = None
    unit: UnitSystem = UnitSystem.METRIC

    def validate(self) -> List[FieldError]:
        errors = _collect(
            _check_positive("waist", self.waist),
            _check_positive("hip", self.hip),
            _check_choice("unit", self.unit, UnitSystem),
        )
        if self.gender is not None:
            errors.extend(_collect(_check_choice("gender", self.gender, Gender)))
        return errors


@dataclass(frozen=True)
class WaterIntakeInput(CalculatorInput):
    calculator_type: ClassVar[CalculatorType] = CalculatorType.WATER_INTAKE
    FIELDS: ClassVar[Dict[str, Coercer]] = {
        "weight": _number,
        "activity_level": _choice(ActivityLevel),
        "unit": _unit,
    }

    weight: float
    activity_level: ActivityLevel
    unit: UnitSystem = UnitSystem.METRIC

    def validate(self) -> List[FieldError]:
        return _collect(
            _check_positive("weight", self.weight),
            _check_choice("activity_level", self.activity_level, ActivityLevel),
            _check_choice("unit", self.unit, UnitSystem),
        )


INPUT_TYPES: Dict[CalculatorType, type] = {
    cls.calculator_type: cls
    for cls in (
        BmiInput,
        CalorieInput,
        HeartRateInput,
        BodyFatInput,
        IdealWeightInput,
        WhrInput,
        WaterIntakeInput,
    )
}
