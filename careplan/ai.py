import requests
from requests.exceptions import RequestException
from typing import Optional, Dict, Any
import logging
import json
import re

from .prompts import build_care_plan_prompt

logger = logging.getLogger(__name__)

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_MODEL = "gemini-1.5-pro-001"

DEFAULT_INSTRUCTION = "No specific instruction."
DEFAULT_WASH_FREQUENCY = "Not specified"
PARSE_ERROR = "Could not parse Gemini response as JSON."

# ```json ... ``` block, anywhere in the reply
JSON_FENCE = re.compile(r"```json\s*([\s\S]*?)\s*```", re.IGNORECASE)


class CarePlanError(Exception):
    pass


def extract_json_text(raw: str) -> str:
    """Inner content of a ```json fence if the reply has one, else the whole reply."""
    match = JSON_FENCE.search(raw)
    if match:
        return match.group(1).strip()
    return raw.strip()


def as_list(value) -> list:
    """A list field from the model: a lone string is one entry, anything else that is not a list is missing."""
    if isinstance(value, list):
        return value
    if isinstance(value, str) and value.strip():
        return [value]
    return []


def normalize_care_plan(parsed: Dict[str, Any]) -> Dict[str, Any]:
    """
    Reshape the model's JSON into the stored care plan.

    ingredients [{name, howToUse}] is split into a name list and a
    name -> instruction mapping built from the same entries. Fields of the
    wrong type are treated as missing.
    """
    ingredients = []
    instructions = {}
    for item in as_list(parsed.get("ingredients")):
        if item is None:
            continue
        if isinstance(item, dict):
            name = str(item.get("name") or "")
            how_to_use = item.get("howToUse")
            if not isinstance(how_to_use, str) or not how_to_use:
                how_to_use = DEFAULT_INSTRUCTION
        else:
            name = str(item)
            how_to_use = DEFAULT_INSTRUCTION
        ingredients.append(name)
        instructions[name] = how_to_use

    wash_frequency = parsed.get("washFrequency")
    if not isinstance(wash_frequency, str) or not wash_frequency.strip():
        wash_frequency = DEFAULT_WASH_FREQUENCY

    return {
        "ingredients": ingredients,
        "instructions": instructions,
        "wash_frequency": wash_frequency,
        "tips": as_list(parsed.get("tips")),
        "resources": as_list(parsed.get("resources")),
    }


def error_payload(reason: str) -> Dict[str, str]:
    return {"error": PARSE_ERROR, "raw_response": reason}


class CarePlanClient:
    """Client for the Gemini generateContent endpoint"""

    def __init__(self, api_key: Optional[str], model: str = DEFAULT_MODEL, timeout: Optional[float] = None):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self.base_url = GEMINI_BASE_URL

    def _request_body(self, prompt: str) -> Dict[str, Any]:
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": 0.7,
                "topK": 40,
                "topP": 0.95,
                "maxOutputTokens": 2048,
            },
        }

    def _make_request(self, prompt: str) -> str:
        """
        POST the prompt and return the first candidate's text.

        Raises CarePlanError for anything short of a usable text reply.
        """
        if not self.api_key:
            raise CarePlanError("GEMINI_API_KEY is not provided.")

        url = f"{self.base_url}/{self.model}:generateContent"
        logger.info("Sending request to Gemini API (model=%s)", self.model)

        try:
            response = requests.post(
                url,
                params={"key": self.api_key},
                json=self._request_body(prompt),
                timeout=self.timeout,
            )
        except RequestException as e:
            raise CarePlanError(f"Gemini request failed: {e}") from e

        if not response.ok:
            try:
                details = response.json()
            except ValueError:
                details = response.text
            raise CarePlanError(f"HTTP error! status: {response.status_code}, details: {json.dumps(details)}")

        try:
            result = response.json()
            raw_text = result["candidates"][0]["content"]["parts"][0]["text"]
        except (ValueError, KeyError, IndexError, TypeError):
            raw_text = None

        if not raw_text:
            raise CarePlanError("No text returned by Gemini.")

        logger.info("Raw Gemini response: %s", raw_text)
        return raw_text

    def generate(self, prompt: str) -> Dict[str, Any]:
        """
        Ask the model for a care plan.

        Never raises: failures come back as {"error", "raw_response"}.
        """
        try:
            raw_text = self._make_request(prompt)
            parsed = json.loads(extract_json_text(raw_text))
            if not isinstance(parsed, dict):
                raise CarePlanError("Gemini returned JSON that is not an object.")
            return normalize_care_plan(parsed)
        except (CarePlanError, ValueError, TypeError, AttributeError) as e:
            logger.error("Gemini fetch error: %s", e)
            return error_payload(str(e))


def generate(api_key: Optional[str], prompt: str, **kwargs) -> Dict[str, Any]:
    return CarePlanClient(api_key, **kwargs).generate(prompt)


def generate_care_plan(survey_data: dict, config) -> Dict[str, Any]:
    prompt = build_care_plan_prompt(survey_data)
    client = CarePlanClient(config.gemini_api_key, model=config.gemini_model, timeout=config.gemini_timeout)
    return client.generate(prompt)
