import httpx
import pytest
import pytest_asyncio
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from oktagon.adapter.okta_client import OktaClient
from oktagon.domain.entities import OktaConfiguration
from tests.fixtures.fake_okta import ORGANISATION_URL, FakeOkta


@pytest.fixture(scope="session")
def private_key_pem() -> str:
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture
def configuration(private_key_pem) -> OktaConfiguration:
    return OktaConfiguration(
        client_id="client-id", private_key=private_key_pem, organisation_url=ORGANISATION_URL
    )


@pytest.fixture
def fake_okta() -> FakeOkta:
    okta = FakeOkta()
    okta.add_user("00u1", "jane@acme.com", "ACTIVE")
    okta.add_user("00u2", "john@acme.com", "STAGED", "John", "Roe")
    okta.add_user("00u3", "gone@acme.com", "DEPROVISIONED", "Gone", "")
    okta.add_group("00g1", "Engineering")
    okta.members.add(("00g1", "00u1"))
    return okta


@pytest_asyncio.fixture
async def okta_client(configuration, fake_okta):
    client = OktaClient(
        configuration, ["okta.users.manage"], transport=httpx.MockTransport(fake_okta.handler)
    )
    async with client:
        yield client
