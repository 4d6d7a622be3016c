# SPDX-License-Identifier: Apache-2.0
# SPDX-FileCopyrightText: 2025 The Linux Foundation
# ruff: noqa: S106

"""
Tests for Pydantic models in netrc_parse.models.

This module tests:
- Machine rendering and the parse round trip
- Password masking in repr
- Netrc convenience accessors
"""

import pytest

from netrc_parse import Machine, Netrc, parse


class TestMachineRendering:
    """Test Machine.__str__."""

    def test_full_entry(self) -> None:
        """Test that all fields render in fixed order."""
        machine = Machine(name="example.com", login="foo", password="bar", account="acct")
        assert str(machine) == "machine example.com login foo password bar account acct"

    def test_default_entry(self) -> None:
        """Test that an unnamed entry renders as default."""
        assert str(Machine(login="anonymous")) == "default login anonymous"

    def test_empty_default(self) -> None:
        """Test that an empty default renders as the bare keyword."""
        assert str(Machine()) == "default"

    def test_missing_fields_omitted(self) -> None:
        """Test that absent fields leave no trace."""
        assert str(Machine(name="h", account="a")) == "machine h account a"

    def test_empty_string_kept(self) -> None:
        """Test that empty values are distinct from absent ones."""
        assert str(Machine(name="h", login="")) == "machine h login "

    @pytest.mark.parametrize(
        "machine",
        [
            Machine(name="example.com", login="foo", password="bar"),
            Machine(name="例子.com", login="用户", password="密码", account="帐户"),
            Machine(password="p@ss"),
            Machine(),
            Machine(name="h", account="a"),
        ],
    )
    def test_round_trip(self, machine: Machine) -> None:
        """Test that a rendered entry parses back to an equal Machine."""
        netrc = parse(str(machine))
        assert netrc.machines == [machine]


class TestMachineRepr:
    """Test Machine.__repr__."""

    def test_repr_masks_password(self) -> None:
        """Test that repr masks the password for security."""
        machine = Machine(name="gerrit.example.org", login="testuser", password="supersecret")
        repr_str = repr(machine)
        assert "supersecret" not in repr_str
        assert "****" in repr_str
        assert "testuser" in repr_str
        assert "gerrit.example.org" in repr_str

    def test_repr_without_password(self) -> None:
        """Test that an absent password shows as None."""
        assert "password=None" in repr(Machine(name="h"))

    def test_is_default(self) -> None:
        """Test the is_default property."""
        assert Machine().is_default is True
        assert Machine(name="h").is_default is False


class TestNetrc:
    """Test Netrc accessors."""

    def test_defaults_empty(self) -> None:
        """Test that a new Netrc is empty."""
        netrc = Netrc()
        assert netrc.machines == []
        assert netrc.macdefs == []
        assert netrc.unknown_entries == []

    def test_has_default(self) -> None:
        """Test the has_default property."""
        assert parse("machine a default").has_default is True
        assert parse("machine a").has_default is False

    def test_hosts(self) -> None:
        """Test that hosts keep file order and duplicates and skip defaults."""
        netrc = parse("machine b default machine a machine b")
        assert netrc.hosts == ["b", "a", "b"]

    def test_macro(self) -> None:
        """Test lookup of macro commands by name."""
        netrc = parse("macdef init\nbin\n\nmacdef init\nquit\n\nmacdef other\nls\n")
        assert netrc.macro("init") == ["bin"]
        assert netrc.macro("other") == ["ls"]
        assert netrc.macro("missing") is None

    def test_model_dump(self) -> None:
        """Test that the parsed structure dumps to plain data."""
        netrc = parse("machine h login u macdef m\nbin\n")
        data = netrc.model_dump()
        assert data["machines"] == [
            {"name": "h", "login": "u", "password": None, "account": None}
        ]
        assert [list(macro) for macro in data["macdefs"]] == [["m", ["bin"]]]
        assert data["unknown_entries"] == []
