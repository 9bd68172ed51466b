"""HealthTipsAgent - Personalized Tips from Calculator Results

This agent sends a calculator's formatted result and the user's inputs to
Gemini and returns 3-5 short, encouraging tips plus a disclaimer.

Design Decisions:
    1. JSON Mode: The model answers with {"healthTips": [...], "disclaimer": "..."}
    2. Never Raises: Network errors, timeouts, blocked or malformed responses
       all become a single "error occurred" tip with the standard disclaimer
    3. Disclaimer Always Present: A missing disclaimer is filled in
    4. No Retry: One request per calculation

Prompt Engineering:
    - Calculator-specific guidance (what to focus on per calculator)
    - Tone constraints: positive, non-judgmental, small sustainable changes
    - Safety: no diagnosis, refer to a professional where relevant
"""
from typing import Dict, Any
import json
import logging

from config.llm import get_gemini_model
from config.settings import MIN_TIPS, MAX_TIPS, TIP_REQUEST_TIMEOUT_SECONDS
from core.observability import trace_agent, Tracer, log_context, metrics
from models.inputs import CalculatorType
from models.tips import DEFAULT_DISCLAIMER, TipRequest, TipResponse

logger = logging.getLogger(__name__)

_NOT_CONFIGURED = object()

CALCULATOR_GUIDANCE: Dict[str, str] = {
    CalculatorType.BMI.value: (
        "If overweight or obese, suggest gradual changes such as more vegetables and "
        "moderate exercise like walking. If underweight, suggest nutrient-dense foods and "
        "talking to a doctor or dietitian. If normal, suggest keeping current habits."
    ),
    CalculatorType.CALORIE.value: (
        "Relate the estimate to the activity level. Suggest portion control, healthier "
        "swaps, or how to maintain intake."
    ),
    CalculatorType.HEART_RATE.value: (
        "Explain what training in this zone does for the heart. Suggest activities that "
        "fit the zone, such as brisk walking, jogging or cycling."
    ),
    CalculatorType.BODY_FAT.value: (
        "Explain the category. For high body fat suggest strength training and a balanced "
        "diet; for fitness or acceptable ranges suggest maintaining habits."
    ),
    CalculatorType.IDEAL_WEIGHT.value: (
        "Present the range as a general guideline that varies between people. Suggest "
        "gradual, healthy approaches rather than rapid loss or gain."
    ),
    CalculatorType.WHR.value: (
        "Explain the risk linked to the ratio. For moderate or high risk suggest core "
        "exercise and a balanced diet to improve fat distribution."
    ),
    CalculatorType.WATER_INTAKE.value: (
        "Stress why hydration matters. Suggest practical habits: carrying a bottle, "
        "reminders, water-rich foods."
    ),
}


class HealthTipsAgent:
    """
    HEALTH TIPS AGENT: the only component that talks to the LLM.

    FALLBACK STRATEGY:
    If Gemini is not configured, fails, or answers without a usable
    healthTips list, returns TipResponse.fallback().
    """

    def __init__(self, model: Any = _NOT_CONFIGURED):
        self.model = get_gemini_model() if model is _NOT_CONFIGURED else model

    @trace_agent
    def run(self, request: TipRequest) -> TipResponse:
        if not self.model:
            return self._fallback("Gemini model not configured")

        log_context(request.to_payload(), "HealthTipsAgent:request")
        try:
            response = self.model.generate_content(
                self._build_prompt(request),
                generation_config={"response_mime_type": "application/json"},
                request_options={"timeout": TIP_REQUEST_TIMEOUT_SECONDS},
            )
            return self._parse(response.text, request)
        except Exception as e:
            logger.error(f"HealthTipsAgent error: {e}", exc_info=True)
            return self._fallback(str(e))

    async def run_async(self, request: TipRequest) -> TipResponse:
        """Same as run(), using Gemini's async client."""
        with Tracer("HealthTipsAgent", request):
            if not self.model:
                return self._fallback("Gemini model not configured")

            log_context(request.to_payload(), "HealthTipsAgent:request")
            try:
                response = await self.model.generate_content_async(
                    self._build_prompt(request),
                    generation_config={"response_mime_type": "application/json"},
                    request_options={"timeout": TIP_REQUEST_TIMEOUT_SECONDS},
                )
                return self._parse(response.text, request)
            except Exception as e:
                logger.error(f"HealthTipsAgent error: {e}", exc_info=True)
                return self._fallback(str(e))

    def _parse(self, text: str, request: TipRequest) -> TipResponse:
        """Parse the model's JSON. Raises on anything structurally invalid."""
        # Clean up potential markdown formatting
        clean_text = text.replace("```json", "").replace("```", "").strip()
        tips = TipResponse.from_payload(json.loads(clean_text))

        log_context(tips.to_payload(), "HealthTipsAgent:response")
        logger.info(f"HealthTipsAgent: {len(tips.health_tips)} tips generated for {request.calculator_type}")
        return tips

    def _build_prompt(self, request: TipRequest) -> str:
        guidance = CALCULATOR_GUIDANCE.get(
            request.calculator_type,
            "Interpret the result and suggest small, practical next steps.",
        )

        return f"""
You are a supportive and knowledgeable health and wellness advisor.
Give actionable, personalized, encouraging tips based on a health calculator result.

=== CALCULATION ===
- Calculator: {request.calculator_type}
- Result: {request.calculator_result}
- User data: {request.user_data or "Not provided"}

=== HOW TO ADVISE ===
1. Interpret the result in the context of the calculator and the user data.
2. Give {MIN_TIPS}-{MAX_TIPS} concise, actionable tips.
3. Focus for this calculator: {guidance}
4. Tone: positive and non-judgmental. Favor small, sustainable changes.
5. Never diagnose or mention medication. Suggest a healthcare provider where relevant.

=== OUTPUT FORMAT (JSON) ===
{{
  "healthTips": ["tip 1", "tip 2", "tip 3"],
  "disclaimer": "{DEFAULT_DISCLAIMER}"
}}
"""

    def _fallback(self, error: str = "") -> TipResponse:
        logger.warning(f"HealthTipsAgent using fallback: {error}")
        metrics.record_tip_fallback()
        return TipResponse.fallback()
