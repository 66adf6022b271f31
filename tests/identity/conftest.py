import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def identity_bed():
    from identity.domain import identity

    bed = DomainFixture(identity)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(identity_bed):
    """Run each test inside the identity context and wipe users afterwards."""
    with identity_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        for _, broker in current_domain.brokers.items():
            broker._data_reset()
        current_domain.event_store.store._data_reset()


@pytest.fixture()
def admin_id():
    from identity.user.authentication import seed_admin

    return seed_admin("admin", "admin")
