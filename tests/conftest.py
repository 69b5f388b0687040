import os
# Keep test runs independent of a developer's .env / shell.
os.environ["DEPLOYMENT_ENV"] = "development"
os.environ["LOG_FORMAT"] = "text"
os.environ.pop("SENTRY_DSN", None)

import pytest
from fastapi.testclient import TestClient
from engagement_scorer.main import app


@pytest.fixture(scope="function")
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def raw_client():
    """Client that turns unhandled server errors into 500 responses instead of raising."""
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Conversation builders
# ---------------------------------------------------------------------------

def user(content: str) -> dict:
    return {"role": "user", "content": content}


def assistant(content: str) -> dict:
    return {"role": "assistant", "content": content}


def system(content: str) -> dict:
    return {"role": "system", "content": content}


NOVICE_CONVERSATION = [
    user("help me with marketing"),
    assistant("Sure, I can help with marketing. What specifically do you need?"),
    user("make it better"),
]

EXPERT_CONVERSATION = [
    user(
        """Act as a senior software architect with 15 years experience in cloud infrastructure.

I need to design a scalable microservices architecture for an e-commerce platform expecting 1 million daily users.

Requirements:
- Handle 10,000 concurrent users during peak sales
- 99.9% uptime requirement
- Multi-region deployment for latency optimization
- Budget: $50,000/month infrastructure cost

Please provide:
1. High-level architecture diagram description
2. Technology stack recommendations with justification
3. Cost breakdown estimation
4. Scaling strategy for each component"""
    ),
    assistant("Based on your requirements, I recommend a cloud-native microservices architecture..."),
    user(
        "Thanks for the initial design. For the database layer, I need more specifics on the "
        "read/write splitting strategy. Also, please provide concrete evidence for why you chose "
        "Kubernetes over AWS ECS, including performance benchmarks if available."
    ),
]
