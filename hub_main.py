"""HealthCalc Hub - Health Calculators with Personalized Tips

Pipeline per submission:
    validated input -> CalculatorAgent -> tip request -> HealthTipsAgent

The hub owns a single immutable ViewState. Every submission starts a new
generation; tip results from an older generation are dropped.
"""
import asyncio
import logging
from dataclasses import fields
from typing import Optional, Tuple

from agents.calculator_agent import CalculatorAgent
from agents.tips_agent import HealthTipsAgent
from core.observability import get_metrics_summary
from models.inputs import CalculatorInput, CalculatorType, INPUT_TYPES
from models.tips import TipRequest, TipResponse
from models.view_state import ViewState
from services.tip_formatter import build_tip_request, format_result

logger = logging.getLogger(__name__)

TIP_FAILURE_MESSAGE = "Failed to generate health tips. Please try again later."


class HealthCalcHub:
    """
    ORCHESTRATOR: runs calculators and fetches tips for the result.

    The calculator result is always applied before tips are requested, so
    a tip failure never hides it.

    Attributes:
        calculator: Deterministic CalculatorAgent.
        tips_agent: HealthTipsAgent (or any object with run / run_async).
        state: Current ViewState.
    """

    def __init__(self, calculator: Optional[CalculatorAgent] = None, tips_agent: Optional[HealthTipsAgent] = None):
        self.calculator = calculator or CalculatorAgent()
        self.tips_agent = tips_agent or HealthTipsAgent()
        self.state = ViewState()

    def select_calculator(self, calculator_type: CalculatorType) -> ViewState:
        self.state = self.state.select_calculator(calculator_type)
        return self.state

    def calculate(self, data: CalculatorInput) -> Tuple[int, TipRequest]:
        """Compute the result and move the view to RESULT_READY.

        If the calculation raises, the previous state is restored.

        Returns:
            (generation, tip request) to pass to fetch_tips / fetch_tips_async.
        """
        previous = self.state
        self.state = self.state.begin(data.calculator_type)
        generation = self.state.generation

        try:
            result = self.calculator.run(data)
            request = build_tip_request(data, result)
        except Exception:
            self.state = previous
            raise

        self.state = self.state.result_ready(generation, result, request)
        return generation, request

    def fetch_tips(self, generation: int, request: TipRequest) -> ViewState:
        try:
            tips = self.tips_agent.run(request)
        except Exception as e:
            logger.error(f"Tip request failed: {e}", exc_info=True)
            return self._apply_failure(generation)
        return self._apply_tips(generation, tips)

    async def fetch_tips_async(self, generation: int, request: TipRequest) -> ViewState:
        try:
            tips = await self.tips_agent.run_async(request)
        except Exception as e:
            logger.error(f"Tip request failed: {e}", exc_info=True)
            return self._apply_failure(generation)
        return self._apply_tips(generation, tips)

    def submit(self, data: CalculatorInput) -> ViewState:
        """Calculate, then fetch tips synchronously."""
        generation, request = self.calculate(data)
        return self.fetch_tips(generation, request)

    async def submit_async(self, data: CalculatorInput) -> ViewState:
        generation, request = self.calculate(data)
        return await self.fetch_tips_async(generation, request)

    def get_metrics(self) -> dict:
        """Get observability metrics for this process."""
        return get_metrics_summary()

    def _apply_tips(self, generation: int, tips: TipResponse) -> ViewState:
        if not self.state.is_current(generation):
            logger.info(f"Dropping stale tips for generation {generation} (current: {self.state.generation})")
            return self.state
        if tips.is_fallback:
            self.state = self.state.tips_failed(generation, tips.health_tips[0], tips)
        else:
            self.state = self.state.tips_ready(generation, tips)
        return self.state

    def _apply_failure(self, generation: int) -> ViewState:
        if not self.state.is_current(generation):
            logger.info(f"Dropping stale tip failure for generation {generation}")
            return self.state
        self.state = self.state.tips_failed(generation, TIP_FAILURE_MESSAGE)
        return self.state


MENU = {
    "1": CalculatorType.BMI,
    "2": CalculatorType.CALORIE,
    "3": CalculatorType.HEART_RATE,
    "4": CalculatorType.BODY_FAT,
    "5": CalculatorType.IDEAL_WEIGHT,
    "6": CalculatorType.WHR,
    "7": CalculatorType.WATER_INTAKE,
}


def _prompt_input(calculator_type: CalculatorType) -> Optional[CalculatorInput]:
    """Ask for each field of the calculator's input; re-ask until valid."""
    input_cls = INPUT_TYPES[calculator_type]
    while True:
        raw = {}
        for f in fields(input_cls):
            raw[f.name] = input(f"  {f.name.replace('_', ' ')}: ").strip()
        parsed = input_cls.parse(raw)
        if parsed.ok:
            return parsed.value
        for error in parsed.errors:
            print(f"  ✖ {error.field}: {error.message}")
        if input("  Try again? [Y/n] ").strip().lower() == "n":
            return None


def _print_state(state: ViewState):
    if state.result is not None:
        print(f"\nResult ({state.active_calculator.value}): {format_result(state.result)}")
    if state.tip_error and not state.tips:
        print(f"\n⚠ {state.tip_error}")
    if state.tips:
        print("\nPersonalized Health Tips:")
        for tip in state.tips.health_tips:
            print(f"  • {tip}")
        print(f"\n{state.tips.disclaimer}")


async def run_console(hub: HealthCalcHub):
    """Interactive loop. Runs on one event loop for the whole session, since
    Gemini's async client stays bound to the loop of its first call."""
    print("=== HealthCalc Hub ===")
    print("Your health calculation toolkit, with personalized tips.\n")

    while True:
        print("\nCalculators:")
        for key, calculator_type in MENU.items():
            print(f"  {key}. {calculator_type.value}")
        choice = input("\nChoose a calculator (or 'exit'): ").strip().lower()
        if choice in ["exit", "quit"]:
            print("Take care! Goodbye.")
            break
        if choice not in MENU:
            print("Please pick a number from the list.")
            continue

        calculator_type = MENU[choice]
        hub.select_calculator(calculator_type)
        data = _prompt_input(calculator_type)
        if data is None:
            continue

        print("Generating tips...")
        state = await hub.submit_async(data)
        _print_state(state)

    logger.info(f"Session metrics: {hub.get_metrics()}")


def main(hub: Optional[HealthCalcHub] = None):
    asyncio.run(run_console(hub or HealthCalcHub()))


if __name__ == "__main__":
    main()
