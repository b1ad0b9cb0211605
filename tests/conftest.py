"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import json
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


SAMPLE_QUESTIONS = {
    "best-documentation": [
        "Where does your documentation live?",
        "Who maintains it?",
        "How do you measure its usefulness?",
    ],
    "best-design-token-system": [
        "How are your tokens organized?",
        "How are tokens distributed?",
    ],
    "best-adoption": [
        "How many teams use the system?",
    ],
}

GENERAL_QUESTIONS = [
    "What’s the name of your organization?",
    "What’s the name of your design system?",
    "How big is your overall product organization (designers, developers, etc.)?",
    "How long has your design system existed?",
]


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (drive the FastAPI app)")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def questions_file(tmp_path):
    """Write the sample question bank to a temporary file."""
    path = tmp_path / "questions.json"
    path.write_text(json.dumps(SAMPLE_QUESTIONS), encoding="utf-8")
    return path


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "db.json"


@pytest.fixture
def settings(tmp_path, questions_file, db_path):
    """Settings pointing at temporary storage, ignoring any local .env."""
    from config import Settings

    return Settings(
        _env_file=None,
        db_path=db_path,
        questions_path=questions_file,
        general_questions=GENERAL_QUESTIONS,
    )


@pytest.fixture
def bank(questions_file):
    from dsa_survey.core.question_bank import load_question_bank

    return load_question_bank(questions_file)


@pytest.fixture
def store(db_path):
    from dsa_survey.storage.answer_store import AnswerStore

    return AnswerStore(db_path)


@pytest.fixture
def service(settings):
    from dsa_survey.api.main import build_service

    return build_service(settings)


@pytest.fixture
def client(settings):
    """TestClient with the app lifespan running."""
    from fastapi.testclient import TestClient

    from dsa_survey.api.main import create_app

    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def sample_questions():
    """Provide the sample question bank as a dict."""
    return {category: list(questions) for category, questions in SAMPLE_QUESTIONS.items()}


@pytest.fixture
def general_questions():
    return list(GENERAL_QUESTIONS)
