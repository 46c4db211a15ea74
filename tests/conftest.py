"""
Pytest fixtures for the haircare tests.
"""
import dataclasses
import json
from unittest import mock

import pytest
from django.apps import apps
from django.contrib.auth import get_user_model


SURVEY = {
    "hair_type": "Type 3B curls",
    "hair_texture": "Fine",
    "porosity": "High",
    "scalp_condition": "Dry and itchy",
    "product_use": "Sulfate-free shampoo, leave-in conditioner",
    "styling_habits": "Wash and go, diffuser twice a week",
    "hair_goals": "Less frizz, more definition",
    "lifestyle": "Swims three times a week",
}

MODEL_PLAN = {
    "ingredients": [
        {"name": "Aloe vera", "howToUse": "Apply to the scalp before washing."},
        {"name": "Shea butter", "howToUse": "Seal ends after moisturizing."},
        {"name": "Rice water"},
    ],
    "washFrequency": "2-3 times/week",
    "tips": ["Sleep on a satin pillowcase.", "Rinse chlorine out after swimming."],
    "resources": [{"name": "NaturallyCurly", "type": "Website"}],
}


def gemini_response(text=None, status_code=200, body=None):
    """A stand-in for requests.Response from generateContent"""
    response = mock.Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if body is None:
        body = {"candidates": [{"content": {"parts": [{"text": text}]}}]}
    response.json.return_value = body
    response.text = json.dumps(body)
    return response


def fenced(payload):
    return f"Here is your plan:\n```json\n{json.dumps(payload, indent=2)}\n```\nEnjoy!"


@pytest.fixture
def survey_data():
    return dict(SURVEY)


@pytest.fixture
def model_plan():
    return json.loads(json.dumps(MODEL_PLAN))


@pytest.fixture(autouse=True)
def careplan_settings(tmp_path):
    """Point PDF output at a temp dir and use a fake API key for every test."""
    app = apps.get_app_config("careplan")
    original = app.config
    config = dataclasses.replace(
        original,
        gemini_api_key="test-key",
        pdf_root=tmp_path / "pdfs",
    )
    app.config = config
    yield config
    app.config = original


@pytest.fixture
def user(db):
    return get_user_model().objects.create_user("alice", "a@x.com", "pw")


@pytest.fixture
def logged_in_client(client, user):
    client.force_login(user)
    return client


@pytest.fixture
def mock_post():
    with mock.patch("careplan.ai.requests.post") as post:
        yield post


@pytest.fixture
def make_response():
    return gemini_response


@pytest.fixture
def fence():
    return fenced
