from unittest.mock import MagicMock

import pytest
import requests

from pizza_ordering import Address, CustomerIdentity, DominosClient


@pytest.fixture
def identity():
    return CustomerIdentity(
        email="foo@example.com",
        first_name="Dominos",
        last_name="Pizza",
        phone="443-554-6667",
    )


@pytest.fixture
def home_address():
    return Address(
        street="747 W 40th St",
        city="Baltimore",
        region="MD",
        postal_code="21211",
        type="House",
    )


@pytest.fixture
def remote_address():
    return Address(
        street="5905 Bonnie View Dr",
        city="Baltimore",
        region="MD",
        postal_code="21209",
        type="Delivery",
    )


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(identity, session):
    return DominosClient(identity=identity, session=session)

