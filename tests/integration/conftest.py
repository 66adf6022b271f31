"""Fixtures for cross-domain tests that run the full application.

Requests go through the real middleware stack: the session cookie, the
route-to-domain context switch and the startup seeding.
"""

import os

import pytest


@pytest.fixture(scope="session")
def storefront_app(request):
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from app import app

    return app


def _reset(domain):
    with domain.domain_context():
        for _, provider in domain.providers.items():
            provider._data_reset()
        for _, broker in domain.brokers.items():
            broker._data_reset()
        domain.event_store.store._data_reset()


@pytest.fixture()
def http(storefront_app):
    """A TestClient with the lifespan started, so the admin and catalogue are seeded."""
    from catalogue.domain import catalogue
    from fastapi.testclient import TestClient
    from identity.domain import identity
    from ordering.domain import ordering

    with TestClient(storefront_app) as client:
        yield client

    for domain in (identity, catalogue, ordering):
        _reset(domain)
