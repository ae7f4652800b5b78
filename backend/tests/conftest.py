"""Shared pytest fixture: reset database and force offline providers per test."""

import pytest
from sqlmodel import SQLModel

from agent_platform import models  # noqa: F401
from agent_platform.config import settings
from agent_platform.db import engine


@pytest.fixture(autouse=True)
def reset_database():
    original_key = settings.openai_api_key
    original_token = settings.gh_actions_token
    settings.openai_api_key = ""
    settings.gh_actions_token = ""
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield
    settings.openai_api_key = original_key
    settings.gh_actions_token = original_token
