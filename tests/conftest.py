"""
Module: conftest.py
Description: Shared pytest fixtures for IronMQ client tests.

Provides a client pointed at a fake cloud, a seeded backoff random
source and a recording sleep so retry timing can be asserted without
waiting. HTTP traffic is mocked with pytest-httpx.
"""

import random

import pytest

from ironmq.client import Client
from ironmq.config.settings import Cloud

PROJECT_ID = "4f1a2b3c4d5e6f7a8b9c0d1e"
TOKEN = "test-token"


@pytest.fixture
def cloud():
    """Plain-HTTP cloud on a non-default port so URLs are matched verbatim."""
    return Cloud(scheme="http", host="mq.test", port=8080)


@pytest.fixture
def base_url(cloud):
    """Project base URL for the fake cloud."""
    return f"http://{cloud.host}:{cloud.port}/1/projects/{PROJECT_ID}"


@pytest.fixture
def sleeps():
    """Backoff waits recorded instead of slept."""
    return []


@pytest.fixture
def client(cloud, sleeps):
    """
    Provide a Client for the fake cloud.

    Backoff jitter is seeded and sleeps are recorded, so retry tests run
    instantly and deterministically.
    """
    return Client(
        PROJECT_ID,
        TOKEN,
        cloud=cloud,
        rng=random.Random(1234),
        sleep=sleeps.append
    )


@pytest.fixture
def queue(client):
    """Queue using the default deflate body encoding."""
    return client.queue("test-queue")


@pytest.fixture
def plain_queue(client):
    """Queue that sends bodies uncompressed."""
    return client.queue("test-queue", encoding="plain")


@pytest.fixture
def messages_url(base_url):
    return f"{base_url}/queues/test-queue/messages"
