"""Tier 2 fixtures: real Kubo daemon at localhost:5001."""

from __future__ import annotations

import uuid

import httpx
import pytest

from ipfs_pinapi.ipfs.http import KuboHttpApi
from ipfs_pinapi.ipfs.pin import KuboPinAPI
from tests.conftest import make_test_config

KUBO_URL = "http://127.0.0.1:5001"


@pytest.fixture(scope="session")
def kubo_available():
    """Check if local Kubo daemon is running. Skip tier2 tests if not."""
    try:
        r = httpx.post(f"{KUBO_URL}/api/v0/id", timeout=3)
        if r.status_code == 200:
            return True
        pytest.skip("Kubo daemon not available at localhost:5001")
    except (httpx.ConnectError, httpx.TimeoutException):
        pytest.skip("Kubo daemon not available at localhost:5001")


@pytest.fixture
async def real_pin_api(kubo_available):
    """KuboPinAPI against the local daemon."""
    async with KuboHttpApi.from_config(make_test_config(api_url=KUBO_URL, timeout=30)) as http:
        yield KuboPinAPI(http)


@pytest.fixture
async def unpinned_content(kubo_available):
    """Add unique content to Kubo without pinning it, return its CID.

    Teardown removes any pin a test left behind.
    """
    content = f"ipfs-pinapi-test-{uuid.uuid4()}".encode()
    async with httpx.AsyncClient(base_url=KUBO_URL) as client:
        resp = await client.post(
            "/api/v0/add",
            params={"pin": "false"},
            files={"file": ("test.txt", content)},
        )
        cid = resp.json()["Hash"]
        yield cid
        await client.post("/api/v0/pin/rm", params={"arg": cid})
