import pytest

from bullscheduler.credentials import CREDENTIAL_DESCRIPTOR, BullSchedulerCredentials, verify_credentials


def test_authenticate_adds_bearer_header():
    creds = BullSchedulerCredentials(url="http://scheduler.test", api_key="s3cret")
    headers = creds.authenticate({"Accept": "application/json"})
    assert headers == {"Accept": "application/json", "Authorization": "Bearer s3cret"}
    assert "s3cret" not in repr(creds)


def test_credentials_accept_wire_names():
    creds = BullSchedulerCredentials.model_validate({"url": "http://scheduler.test", "apiKey": "k"})
    assert creds.endpoint("/verify-auth") == "http://scheduler.test/verify-auth"


def test_descriptor_fields():
    fields = {p["name"]: p for p in CREDENTIAL_DESCRIPTOR["properties"]}
    assert set(fields) == {"url", "apiKey"}
    assert fields["apiKey"]["typeOptions"] == {"password": True}
    assert CREDENTIAL_DESCRIPTOR["test"]["request"]["url"] == "/verify-auth"


@pytest.mark.asyncio
async def test_verify_credentials_ok(scheduler, http_client, credentials):
    result = await verify_credentials(http_client, credentials)
    assert result.status == "OK"
    assert scheduler.verify_calls == 1


@pytest.mark.asyncio
async def test_verify_credentials_rejected(scheduler, http_client):
    wrong = BullSchedulerCredentials(url="http://scheduler.test", api_key="wrong")
    result = await verify_credentials(http_client, wrong)
    assert result.status == "Error"
    assert "status 401" in result.message
    assert scheduler.verify_calls == 1
