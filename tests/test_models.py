"""Tests 6-7: verify records, bad nodes, options and CID parsing."""

from __future__ import annotations

import pytest

from ipfs_pinapi.errors import ConfigError, ParseError, RemoteError
from ipfs_pinapi.ipfs.path import ResolvedPath, parse_cid
from ipfs_pinapi.models.options import (
    PinAddOptions,
    PinLsOptions,
    PinType,
    PinUpdateOptions,
    resolve_options,
)
from ipfs_pinapi.models.pin import BadPinNode, PinStatus

from tests.conftest import BAD_CID, CID_V0, CID_V1
from tests.factories import make_bad_node, make_verify_record


# ── CID parsing ──────────────────────────────────────────────────


def test_parse_cid_v0_and_v1():
    assert str(parse_cid(CID_V0)) == CID_V0
    assert str(parse_cid(CID_V1)) == CID_V1


@pytest.mark.parametrize("value", [BAD_CID, "", "not a cid at all", "Qm"])
def test_parse_cid_rejects_garbage(value):
    with pytest.raises(ParseError):
        parse_cid(value)


def test_resolved_path():
    path = ResolvedPath.from_cid_string(CID_V1)
    assert str(path) == f"/ipfs/{CID_V1}"
    assert path.root == path.cid
    assert path.remainder == ""


# ── Test 6-7: bad node error derivation ──────────────────────────


def test_bad_node_valid_cid_without_message_has_no_error():
    """Listed as bad, but no message and a parseable CID -> err is None."""
    node = BadPinNode(cid=CID_V0, message="")
    assert node.err is None
    assert str(node.path) == f"/ipfs/{CID_V0}"


def test_bad_node_message_wins():
    node = BadPinNode(cid=CID_V0, message="block was not found locally")
    assert isinstance(node.err, RemoteError)
    assert str(node.err) == "block was not found locally"


def test_bad_node_message_wins_over_bad_cid():
    node = BadPinNode(cid=BAD_CID, message="merkledag: not found")
    assert str(node.err) == "merkledag: not found"
    assert node.path is None


def test_bad_node_unparseable_cid_is_the_error():
    node = BadPinNode(cid=BAD_CID)
    assert isinstance(node.err, ParseError)
    assert node.path is None


# ── Verify record decoding ───────────────────────────────────────


def test_pin_status_from_json():
    status = PinStatus.from_json(
        make_verify_record(CID_V1, ok=False, bad_nodes=[
            make_bad_node(CID_V0, err="missing"),
            make_bad_node(CID_V1),
        ])
    )
    assert status.cid == CID_V1
    assert status.ok is False
    assert [n.cid for n in status.bad_nodes] == [CID_V0, CID_V1]
    assert status.bad_nodes[0].message == "missing"
    assert status.bad_nodes[1].message == ""


def test_pin_status_null_fields_decode_as_zero_values():
    status = PinStatus.from_json({"Cid": None, "Ok": None, "BadNodes": None})
    assert status == PinStatus(cid="", ok=False)


def test_pin_status_without_bad_nodes():
    status = PinStatus.from_json({"Cid": CID_V0, "Ok": True})
    assert status.bad_nodes == ()

    status = PinStatus.from_json({"Cid": CID_V0, "Ok": True, "BadNodes": None})
    assert status.bad_nodes == ()


@pytest.mark.parametrize("data", [
    [],
    "text",
    {"Cid": 1, "Ok": True},
    {"Cid": CID_V0, "Ok": "yes"},
    {"Cid": CID_V0, "Ok": False, "BadNodes": {"Cid": CID_V1}},
    {"Cid": CID_V0, "Ok": False, "BadNodes": ["x"]},
])
def test_pin_status_rejects_bad_shapes(data):
    with pytest.raises(ValueError):
        PinStatus.from_json(data)


def test_records_are_immutable():
    status = PinStatus.from_json(make_verify_record())
    with pytest.raises(AttributeError):
        status.ok = False  # type: ignore[misc]


# ── Options ──────────────────────────────────────────────────────


def test_option_defaults():
    assert PinAddOptions().recursive is True
    assert PinLsOptions().type is PinType.ALL
    assert PinUpdateOptions().unpin is True


def test_ls_type_accepts_strings():
    assert PinLsOptions(type="recursive").type is PinType.RECURSIVE


@pytest.mark.parametrize("factory", [
    lambda: PinAddOptions(recursive=1),
    lambda: PinUpdateOptions(unpin="false"),
    lambda: PinLsOptions(type="everything"),
])
def test_invalid_options(factory):
    with pytest.raises(ConfigError):
        factory()


def test_resolve_options():
    assert resolve_options(PinAddOptions, None, {}) == PinAddOptions()
    assert resolve_options(PinAddOptions, None, {"recursive": False}).recursive is False

    opts = PinUpdateOptions(unpin=False)
    assert resolve_options(PinUpdateOptions, opts, {}) is opts

    with pytest.raises(ConfigError, match="not both"):
        resolve_options(PinUpdateOptions, opts, {"unpin": True})
    with pytest.raises(ConfigError, match="unknown option"):
        resolve_options(PinLsOptions, None, {"stream": True})
    with pytest.raises(ConfigError):
        resolve_options(PinLsOptions, PinAddOptions(), {})
