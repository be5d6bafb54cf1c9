"""Tests for flow overrides."""

import pytest

from funcaptcha import (
    DEFAULT_TABLE,
    FlowNotFoundError,
    FlowTable,
    InvalidConfigError,
    lookup_key,
)

NEW_KEY = "11111111-2222-3333-4444-555555555555"


def test_partial_override_keeps_other_field():
    table = DEFAULT_TABLE.with_overrides({"Login": {"public_key": NEW_KEY}})

    assert table.lookup_key("Login") == NEW_KEY
    assert table.lookup_preset("Login") == "roblox_login"
    assert table.lookup_key("Signup") == DEFAULT_TABLE.lookup_key("Signup")


def test_override_leaves_defaults_untouched():
    DEFAULT_TABLE.with_overrides({"Login": {"public_key": NEW_KEY}})

    assert lookup_key("Login") == "476068BF-9607-4799-B53D-966BE98E2B81"
    assert len(DEFAULT_TABLE) == 6


def test_new_flow_requires_both_fields():
    table = DEFAULT_TABLE.with_overrides(
        {"Trade": {"public_key": NEW_KEY, "preset": "roblox_trade"}}
    )

    assert table.lookup_preset("Trade") == "roblox_trade"
    assert set(table.keys) == set(table.presets)
    assert "Trade" not in DEFAULT_TABLE

    with pytest.raises(InvalidConfigError):
        DEFAULT_TABLE.with_overrides({"Trade": {"preset": "roblox_trade"}})


@pytest.mark.parametrize(
    "fields",
    [
        {"public_key": "not-a-key"},
        {"public_key": "AAAAAAAA-BBBB-CCCC-DDDD-EEEEEEEEEEEE".lower()},
        {"preset": "Roblox Login"},
        {"preset": ""},
        {"site_key": NEW_KEY},
    ],
)
def test_invalid_override_raises(fields):
    with pytest.raises(InvalidConfigError) as exc_info:
        DEFAULT_TABLE.with_overrides({"Login": fields})

    assert "Login" in str(exc_info.value)


def test_override_must_be_a_mapping():
    with pytest.raises(InvalidConfigError):
        DEFAULT_TABLE.with_overrides({"Login": "roblox_login"})


def test_from_toml(write_config):
    path = write_config(
        f"""
[flows.Login]
public_key = "{NEW_KEY}"

[flows.Trade]
public_key = "{NEW_KEY}"
preset = "roblox_trade"
"""
    )

    table = FlowTable.from_toml(path)

    assert table.lookup_key("Login") == NEW_KEY
    assert table.lookup_preset("Trade") == "roblox_trade"
    assert table.lookup_key("GenericCaptcha") == "CC30DB96-0C88-4DEB-86E5-6601927ACBB4"


def test_from_toml_without_flows_matches_defaults(write_config):
    table = FlowTable.from_toml(write_config('[captcha_solver]\napi_key = ""\n'))

    assert table.keys == DEFAULT_TABLE.keys
    assert table.presets == DEFAULT_TABLE.presets


def test_from_toml_with_base(write_config):
    base = FlowTable({})
    path = write_config(f'[flows.Trade]\npublic_key = "{NEW_KEY}"\npreset = "trade"\n')

    table = FlowTable.from_toml(path, base=base)

    assert table.flows == ["Trade"]

    with pytest.raises(FlowNotFoundError):
        table.lookup_key("Login")


def test_from_toml_missing_file(tmp_path):
    with pytest.raises(InvalidConfigError, match="was not found"):
        FlowTable.from_toml(tmp_path / "missing.toml")


def test_from_toml_invalid_toml(write_config):
    with pytest.raises(InvalidConfigError, match="not valid TOML"):
        FlowTable.from_toml(write_config("[flows.Login\npreset = "))


def test_from_toml_invalid_utf8(tmp_path):
    path = tmp_path / "config.toml"
    path.write_bytes(b'[flows.Login]\npreset = "roblox_\xff"\n')

    with pytest.raises(InvalidConfigError, match="not valid UTF-8"):
        FlowTable.from_toml(path)


def test_from_toml_flows_must_be_a_table(write_config):
    with pytest.raises(InvalidConfigError, match="must be a table"):
        FlowTable.from_toml(write_config('flows = "Login"\n'))
