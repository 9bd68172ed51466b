"""Calculator input parsing and validation tests."""
import pytest
from models.inputs import (
    ActivityLevel,
    BmiInput,
    BodyFatInput,
    CalculatorType,
    CalorieInput,
    Gender,
    HeartRateInput,
    INPUT_TYPES,
    InputErrorCode,
    InvalidInputError,
    UnitSystem,
    WaterIntakeInput,
    WhrInput,
)


def error_codes(result):
    return {e.field: e.code for e in result.errors}


class TestParseNumbers:

    def test_valid_bmi(self):
        result = BmiInput.parse({"height": "180", "weight": "80"})
        assert result.ok
        assert result.value == BmiInput(height=180.0, weight=80.0, unit=UnitSystem.METRIC)

    def test_empty_field_is_required(self):
        result = BmiInput.parse({"height": "", "weight": "80"})
        assert not result.ok
        assert error_codes(result) == {"height": InputErrorCode.REQUIRED}

    def test_text_is_not_a_number(self):
        result = BmiInput.parse({"height": "tall", "weight": "80"})
        assert error_codes(result) == {"height": InputErrorCode.NOT_A_NUMBER}

    @pytest.mark.parametrize("raw", ["0", "-5"])
    def test_non_positive_rejected(self, raw):
        result = BmiInput.parse({"height": "180", "weight": raw})
        assert error_codes(result) == {"weight": InputErrorCode.NOT_POSITIVE}

    def test_nan_rejected(self):
        result = BmiInput.parse({"height": "nan", "weight": "80"})
        assert error_codes(result) == {"height": InputErrorCode.NOT_A_NUMBER}

    def test_every_bad_field_reported(self):
        result = BmiInput.parse({})
        assert error_codes(result) == {
            "height": InputErrorCode.REQUIRED,
            "weight": InputErrorCode.REQUIRED,
        }

    def test_unit_defaults_to_metric(self):
        assert BmiInput.parse({"height": "70", "weight": "150"}).value.unit == UnitSystem.METRIC

    def test_unit_is_case_insensitive(self):
        assert BmiInput.parse({"height": "70", "weight": "150", "unit": "Imperial"}).value.unit == UnitSystem.IMPERIAL


class TestParseAge:

    def test_fractional_age(self):
        result = HeartRateInput.parse({"age": "30.5"})
        assert error_codes(result) == {"age": InputErrorCode.NOT_AN_INTEGER}

    def test_whole_float_age_accepted(self):
        assert HeartRateInput.parse({"age": "40.0"}).value == HeartRateInput(age=40)

    def test_age_zero(self):
        result = HeartRateInput.parse({"age": "0"})
        assert error_codes(result) == {"age": InputErrorCode.OUT_OF_RANGE}
        assert result.errors[0].message == "Must be at least 1"

    def test_age_too_high(self):
        result = HeartRateInput.parse({"age": "121"})
        assert error_codes(result) == {"age": InputErrorCode.OUT_OF_RANGE}
        assert result.errors[0].message == "Age seems too high"

    def test_age_limits_inclusive(self):
        assert HeartRateInput.parse({"age": "1"}).ok
        assert HeartRateInput.parse({"age": "120"}).ok


class TestParseChoices:

    def test_missing_gender_and_activity(self):
        result = CalorieInput.parse({"age": "30", "height": "180", "weight": "80"})
        messages = {e.field: e.message for e in result.errors}
        assert error_codes(result) == {
            "gender": InputErrorCode.REQUIRED,
            "activity_level": InputErrorCode.REQUIRED,
        }
        assert messages["gender"] == "Gender is required"
        assert messages["activity_level"] == "Activity level is required"

    def test_unknown_activity_level(self):
        result = WaterIntakeInput.parse({"weight": "70", "activity_level": "extreme"})
        assert error_codes(result) == {"activity_level": InputErrorCode.INVALID_CHOICE}

    def test_valid_calorie(self):
        result = CalorieInput.parse({
            "age": "30", "gender": "MALE", "height": "180", "weight": "80",
            "activity_level": "very_active",
        })
        assert result.ok
        assert result.value.gender == Gender.MALE
        assert result.value.activity_level == ActivityLevel.VERY_ACTIVE

    def test_enum_members_accepted(self):
        result = CalorieInput.parse({
            "age": 30, "gender": Gender.FEMALE, "height": 165, "weight": 60,
            "activity_level": ActivityLevel.LIGHT, "unit": UnitSystem.METRIC,
        })
        assert result.ok
        assert result.value.gender == Gender.FEMALE
        assert result.value.activity_level == ActivityLevel.LIGHT

    def test_whr_gender_optional(self):
        result = WhrInput.parse({"waist": "80", "hip": "100"})
        assert result.ok
        assert result.value.gender is None


class TestBodyFatInput:

    def test_female_requires_hip(self):
        result = BodyFatInput.parse({"gender": "female", "height": "165", "neck": "33", "waist": "75"})
        assert error_codes(result) == {"hip": InputErrorCode.HIP_REQUIRED_FOR_FEMALE}

    def test_female_hip_must_be_positive(self):
        result = BodyFatInput.parse({
            "gender": "female", "height": "165", "neck": "33", "waist": "75", "hip": "-1",
        })
        assert error_codes(result) == {"hip": InputErrorCode.NOT_POSITIVE}

    def test_male_hip_ignored(self):
        result = BodyFatInput.parse({
            "gender": "male", "height": "70", "neck": "15", "waist": "34", "hip": "40", "unit": "imperial",
        })
        assert result.ok
        assert result.value.hip is None

    def test_male_waist_must_exceed_neck(self):
        result = BodyFatInput.parse({"gender": "male", "height": "178", "neck": "40", "waist": "38"})
        assert error_codes(result) == {"waist": InputErrorCode.INVALID_CIRCUMFERENCES}


class TestDirectConstruction:

    def test_invalid_values_raise(self):
        with pytest.raises(InvalidInputError) as exc_info:
            BmiInput(height=-1, weight=80)
        assert exc_info.value.errors[0].code == InputErrorCode.NOT_POSITIVE

    def test_plain_string_choice_rejected(self):
        with pytest.raises(InvalidInputError) as exc_info:
            WaterIntakeInput(weight=70, activity_level="moderate")
        assert exc_info.value.errors[0].code == InputErrorCode.INVALID_CHOICE

    def test_bool_is_not_a_number(self):
        with pytest.raises(InvalidInputError):
            BmiInput(height=True, weight=80)

    def test_inputs_are_frozen(self):
        data = HeartRateInput(age=40)
        with pytest.raises(AttributeError):
            data.age = 41

    def test_every_calculator_has_an_input_type(self):
        assert set(INPUT_TYPES) == set(CalculatorType)
        for calculator_type, cls in INPUT_TYPES.items():
            assert cls.calculator_type == calculator_type
