"""Runtime configuration read from the environment (.env supported)."""
import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from learnify.tools.prompts import DEFAULT_LANGUAGE, check_language


DEFAULT_MODEL = "gemini-2.5-flash"


class PlannerSettings(BaseModel):
    """Settings for one planning run."""
    api_key: Optional[str] = Field(None, repr=False)
    model: str = DEFAULT_MODEL
    language: str = DEFAULT_LANGUAGE
    temperature: Optional[float] = None

    @field_validator('language')
    @classmethod
    def validate_language(cls, v: str) -> str:
        return check_language(v)

    @field_validator('temperature')
    @classmethod
    def validate_temperature(cls, v: float | None) -> float | None:
        """Gemini accepts temperatures between 0 and 2."""
        if v is not None and not 0.0 <= v <= 2.0:
            raise ValueError('temperature must be between 0.0 and 2.0')
        return v


def get_api_key() -> Optional[str]:
    """Return the Gemini API key from GOOGLE_API_KEY, falling back to GEMINI_API_KEY."""
    return os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY") or None


def load_settings(
    model: Optional[str] = None,
    language: Optional[str] = None,
    temperature: Optional[float] = None,
) -> PlannerSettings:
    """
    Build settings from the environment, letting explicit arguments win.

    Environment variables:
        GOOGLE_API_KEY / GEMINI_API_KEY: Gemini API key
        CHAT_MODEL: model name (default gemini-2.5-flash)
        PLANNER_LANGUAGE: "id" or "en"
        PLANNER_TEMPERATURE: sampling temperature
    """
    if temperature is None and os.getenv("PLANNER_TEMPERATURE"):
        temperature = float(os.environ["PLANNER_TEMPERATURE"])

    return PlannerSettings(
        api_key=get_api_key(),
        model=model or os.getenv("CHAT_MODEL", DEFAULT_MODEL),
        language=language or os.getenv("PLANNER_LANGUAGE", DEFAULT_LANGUAGE),
        temperature=temperature,
    )
