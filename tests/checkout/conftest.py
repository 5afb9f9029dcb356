import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def checkout_bed():
    from checkout.domain import checkout

    bed = DomainFixture(checkout)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(checkout_bed):
    with checkout_bed.domain_context():
        yield

        # Clear stored carts and catalog items after every test
        for _, provider in current_domain.providers.items():
            provider._data_reset()
