"""HealthCalc Agent Module.

Agents:
    CalculatorAgent: Deterministic calculator dispatch (units -> formula -> category).
    HealthTipsAgent: Personalized tips from Gemini with a guaranteed fallback.
"""
from agents.calculator_agent import CalculatorAgent
from agents.tips_agent import HealthTipsAgent

__all__ = [
    "CalculatorAgent",
    "HealthTipsAgent",
]
