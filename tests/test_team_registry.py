"""Tests for the franchise code registry."""

import pytest

from wpsignal.data.team_registry import (
    BYE,
    TeamCode,
    _normalize_str,
    abbreviation_for,
    code_for,
    name_for,
)


class TestAbbreviationFor:
    """Tests for abbreviation_for()."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("PACKERS", "GNB"),
            ("Packers", "GNB"),
            ("Green Bay Packers", "GNB"),
            ("49ers", "SFO"),
            ("Texans", "HTX"),
            ("Los Angeles Chargers", "SDG"),
            ("Commanders", "WAS"),
            ("Las Vegas Raiders", "RAI"),
            ("GNB", "GNB"),
            ("BYE", BYE),
        ],
    )
    def test_known_names(self, name, expected):
        assert abbreviation_for(name) == expected

    def test_falls_back_to_nickname(self):
        assert abbreviation_for("New York Football Giants") == "NYG"

    def test_html_entities_decoded(self):
        assert abbreviation_for("Green&nbsp;Bay Packers") == "GNB"

    @pytest.mark.parametrize("name", ["", "   ", "Wildcats", "Toronto Argonauts"])
    def test_unknown_names(self, name):
        assert abbreviation_for(name) is None


class TestOrdinals:
    """Tests for code_for() and name_for()."""

    def test_bye_is_zero(self):
        assert code_for(BYE) == 0
        assert name_for(0) == BYE

    def test_registry_order(self):
        assert code_for("HTX") == 1
        assert code_for("GNB") == 15
        assert code_for("ATL") == 32

    def test_lookups_are_inverse(self):
        for code in TeamCode:
            assert name_for(code_for(code.name)) == code.name

    def test_name_for_accepts_stored_float(self):
        assert name_for(30.0) == "CHI"

    def test_outside_registry_raises(self):
        with pytest.raises(KeyError):
            code_for("XXX")
        with pytest.raises(KeyError):
            name_for(33)


def test_normalize_str():
    assert _normalize_str("  St.  Louis   Rams ") == "ST LOUIS RAMS"
