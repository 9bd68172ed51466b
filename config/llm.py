"""Gemini client factory for the health tips agent."""
import logging
from typing import Optional

import google.generativeai as genai
from config.settings import GOOGLE_API_KEY, GEMINI_MODEL_NAME, GEMINI_SAFETY_SETTINGS

logger = logging.getLogger(__name__)


def get_gemini_model(model_name: str = GEMINI_MODEL_NAME) -> Optional[genai.GenerativeModel]:
    """
    Build the model HealthTipsAgent talks to.

    Returns:
        A GenerativeModel with the tip safety filters, or None when
        GOOGLE_API_KEY is unset (tips then always use the fallback).
    """
    if not GOOGLE_API_KEY:
        logger.warning("GOOGLE_API_KEY not set; health tips will use the fallback response.")
        return None

    genai.configure(api_key=GOOGLE_API_KEY)
    logger.info(f"Gemini tips model: {model_name}")
    return genai.GenerativeModel(model_name=model_name, safety_settings=GEMINI_SAFETY_SETTINGS)
