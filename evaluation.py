"""Calculator & Tip Evaluation Module

This module provides:
1. Reference cases with known results for every calculator
2. Tip response checks (count, disclaimer, non-diagnostic wording)
3. A console summary via run_evaluation()
"""
from typing import Dict, Any, List
from dataclasses import dataclass, field, asdict
import logging

from config.settings import MIN_TIPS, MAX_TIPS
from core.observability import metrics
from models.inputs import (
    ActivityLevel,
    BmiInput,
    BodyFatInput,
    CalculatorInput,
    CalorieInput,
    Gender,
    HeartRateInput,
    IdealWeightInput,
    UnitSystem,
    WaterIntakeInput,
    WhrInput,
)
from models.tips import TipResponse

logger = logging.getLogger(__name__)


@dataclass
class EvaluationCase:
    """A single reference case."""
    name: str
    data: CalculatorInput
    expected: Dict[str, Any]    # result fields that must match exactly


# Reference cases (hand-checked against the formulas)
EVAL_CASES = [
    EvaluationCase(
        name="bmi_metric_normal",
        data=BmiInput(height=180, weight=80),
        expected={"bmi": 24.7, "category": "Normal weight"},
    ),
    EvaluationCase(
        name="calorie_male_sedentary",
        data=CalorieInput(
            age=30, gender=Gender.MALE, height=180, weight=80,
            activity_level=ActivityLevel.SEDENTARY,
        ),
        expected={"calories": 2224},
    ),
    EvaluationCase(
        name="heart_rate_age_40",
        data=HeartRateInput(age=40),
        expected={"lower": 90, "upper": 153},
    ),
    EvaluationCase(
        name="body_fat_male_imperial",
        data=BodyFatInput(gender=Gender.MALE, height=70, neck=15, waist=36, unit=UnitSystem.IMPERIAL),
        expected={"body_fat": 21.3, "category": "Acceptable"},
    ),
    EvaluationCase(
        name="ideal_weight_female_metric",
        data=IdealWeightInput(gender=Gender.FEMALE, height=170),
        expected={"minimum": 55.3, "maximum": 67.6, "unit": "kg"},
    ),
    EvaluationCase(
        name="whr_female_low_risk",
        data=WhrInput(waist=80, hip=100, gender=Gender.FEMALE),
        expected={"ratio": 0.8, "risk": "Low Risk"},
    ),
    EvaluationCase(
        name="water_metric_moderate",
        data=WaterIntakeInput(weight=70, activity_level=ActivityLevel.MODERATE),
        expected={"amount": 2.6, "unit": "Liters"},
    ),
]

DIAGNOSTIC_WORDS = ["you have", "diagnosis", "diagnosed", "disease", "disorder", "prescri"]


@dataclass
class EvaluationResult:
    """Result of evaluating a single case."""
    case_name: str
    passed: bool
    result_correct: bool
    mismatches: Dict[str, Any] = field(default_factory=dict)
    tip_scores: Dict[str, float] = field(default_factory=dict)
    details: str = ""


def score_tips(tips: TipResponse) -> Dict[str, float]:
    """Score a tip response (simple heuristics, 0-1 each)."""
    scores = {}
    count = len(tips.health_tips)

    scores["count"] = 1.0 if MIN_TIPS <= count <= MAX_TIPS else 0.0
    scores["disclaimer"] = 1.0 if tips.disclaimer.strip() else 0.0

    text = " ".join(tips.health_tips).lower()
    scores["safety"] = 1.0 - min(1.0, sum(1 for w in DIAGNOSTIC_WORDS if w in text) / 2)

    # Tips should be short enough to scan
    longest = max((len(t.split()) for t in tips.health_tips), default=0)
    scores["brevity"] = 1.0 if longest <= 40 else max(0.0, 1.0 - (longest - 40) / 40)

    return scores


class TipEvaluator:
    """Runs the reference cases through a HealthCalcHub."""

    def __init__(self, hub):
        self.hub = hub

    def evaluate_case(self, case: EvaluationCase) -> EvaluationResult:
        logger.info(f"Evaluating: {case.name}")

        state = self.hub.submit(case.data)
        actual = asdict(state.result)
        mismatches = {
            key: {"expected": expected, "actual": actual.get(key)}
            for key, expected in case.expected.items()
            if actual.get(key) != expected
        }

        tip_scores = score_tips(state.tips) if state.tips else {}
        tips_ok = bool(tip_scores) and not state.tips.is_fallback and all(s >= 1.0 for s in tip_scores.values())

        return EvaluationResult(
            case_name=case.name,
            passed=not mismatches and tips_ok,
            result_correct=not mismatches,
            mismatches=mismatches,
            tip_scores=tip_scores,
            details=f"State: {state.phase.value}, Tips: {len(state.tips.health_tips) if state.tips else 0}",
        )

    def run_all(self, cases: List[EvaluationCase] = None) -> Dict[str, Any]:
        """Run all evaluation cases and return summary."""
        cases = EVAL_CASES if cases is None else cases
        results = []
        for case in cases:
            try:
                results.append(self.evaluate_case(case))
            except Exception as e:
                logger.error(f"Evaluation failed for {case.name}: {e}")
                results.append(EvaluationResult(
                    case_name=case.name,
                    passed=False,
                    result_correct=False,
                    details=f"Error: {e}",
                ))

        passed = sum(1 for r in results if r.passed)
        correct = sum(1 for r in results if r.result_correct)
        total = len(results)

        avg_scores = {}
        for key in ["count", "disclaimer", "safety", "brevity"]:
            scores = [r.tip_scores.get(key, 0) for r in results if r.tip_scores]
            if scores:
                avg_scores[key] = sum(scores) / len(scores)

        return {
            "pass_rate": f"{passed}/{total} ({passed/total:.0%})" if total else "0/0",
            "results_correct": correct,
            "total": total,
            "results": [
                {
                    "name": r.case_name,
                    "passed": "✅" if r.passed else "❌",
                    "result_correct": r.result_correct,
                    "details": r.details,
                }
                for r in results
            ],
            "tip_scores": avg_scores,
        }


def run_evaluation():
    """Run evaluation and print results."""
    from hub_main import HealthCalcHub

    print("\n" + "="*60)
    print("🧪 HEALTHCALC EVALUATION")
    print("="*60 + "\n")

    metrics.reset()
    evaluator = TipEvaluator(HealthCalcHub())
    summary = evaluator.run_all()

    print(f"Pass Rate: {summary['pass_rate']}")
    print(f"Correct Results: {summary['results_correct']}/{summary['total']}\n")

    print("Individual Results:")
    print("-" * 50)
    for r in summary["results"]:
        print(f"  {r['passed']} {r['name']}: {r['details']}")

    print("\nTip Scores (avg):")
    print("-" * 50)
    for metric, score in summary.get("tip_scores", {}).items():
        bar = "█" * int(score * 10) + "░" * (10 - int(score * 10))
        print(f"  {metric:12} [{bar}] {score:.0%}")

    print("\n" + "="*60)

    return summary


if __name__ == "__main__":
    run_evaluation()
