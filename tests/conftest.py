"""Shared fixtures for ipfs_pinapi tests."""

from __future__ import annotations

import httpx
import pytest

from ipfs_pinapi.ipfs.http import KuboHttpApi
from ipfs_pinapi.ipfs.pin import KuboPinAPI
from ipfs_pinapi.models.config import ClientConfig

from tests.mocks import FakeKubo

# Known-good CIDs: the empty unixfs directory (v0) and a common v1 example.
CID_V0 = "QmUNLLsPACCz1vLxQVkXqqLX5R1X345qqfHbsf67hvA3Nn"
CID_V1 = "bafybeigdyrzt5sfp7udm7hu76uh7y26nf3efuylqabf3oclgtqy55fbzdi"
BAD_CID = "bafy-not-a-cid"


def make_test_config(**overrides) -> ClientConfig:
    """Build a ClientConfig suitable for testing."""
    defaults = dict(
        api_url="http://127.0.0.1:5001",
        timeout=5.0,
        auth="",
        log_level="debug",
    )
    defaults.update(overrides)
    return ClientConfig(**defaults)


@pytest.fixture
def test_config():
    """Default ClientConfig for tests."""
    return make_test_config()


@pytest.fixture
def fake_kubo():
    return FakeKubo()


@pytest.fixture
async def http_api(test_config, fake_kubo):
    """KuboHttpApi whose requests are answered by FakeKubo."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(fake_kubo.handle))
    api = KuboHttpApi.from_config(test_config, client=client)
    yield api
    await client.aclose()


@pytest.fixture
def pin_api(http_api):
    return KuboPinAPI(http_api)
