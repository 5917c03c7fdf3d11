"""Mode registry and optional-field variant tests."""

import pytest

import pyextduration
from pyextduration import Duration
from pyextduration._errors import NegativeDurationError, UnknownUnitError
from pyextduration.modes import (
    HUMAN,
    MILLIS,
    ROOT,
    SECS,
    SECS_F64_MS,
    ModeName,
    get_mode,
)

ALL_MODES = [
    pytest.param(HUMAN, id="human"),
    pytest.param(SECS, id="secs"),
    pytest.param(MILLIS, id="millis"),
    pytest.param(SECS_F64_MS, id="secs_f64_ms"),
]


class TestGetMode:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("human", HUMAN),
            ("secs", SECS),
            ("millis", MILLIS),
            ("secs_f64_ms", SECS_F64_MS),
            ("opt.secs", SECS),
            ("opt.secs_f64_ms", SECS_F64_MS),
            ("opt", ROOT),
            ("", ROOT),
        ],
    )
    def test_lookup(self, name, expected):
        assert get_mode(name) is expected

    def test_enum_lookup(self):
        assert get_mode(ModeName.MILLIS) is MILLIS

    def test_root_is_human(self):
        assert ROOT is HUMAN

    @pytest.mark.parametrize("name", ["minutes", "opt.bogus", "optsecs", "opt.", "HUMAN"])
    def test_unknown(self, name):
        with pytest.raises(ValueError, match="unknown duration mode"):
            get_mode(name)


class TestSerialize:
    def test_human(self, human_mode):
        assert human_mode.serialize(Duration.from_millis(65_000)) == "1m 5s"

    def test_secs(self):
        assert SECS.serialize(Duration.from_millis(1234)) == 1

    def test_millis(self, millis_mode):
        assert millis_mode.serialize(Duration(1, 999_500_000)) == 2000

    def test_secs_f64_ms(self):
        assert SECS_F64_MS.serialize(Duration.from_millis(1234)) == 1.234

    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_output_type(self, mode):
        assert isinstance(mode.serialize(Duration(3)), mode.output_type)


class TestDeserialize:
    @pytest.mark.parametrize("mode", ALL_MODES)
    @pytest.mark.parametrize("value", [60.25, "1m250ms", "250ms 1m"])
    def test_every_mode_accepts_every_shape(self, mode, value):
        assert mode.deserialize(value) == Duration.from_millis(60_250)

    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_integer_seconds(self, mode):
        assert mode.deserialize(42) == Duration(42)


class TestOptional:
    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_none_round_trip(self, mode):
        assert mode.deserialize_opt(None) is None
        assert mode.serialize_opt(None) is None

    def test_none_is_not_zero(self, human_mode):
        assert human_mode.serialize_opt(None) != "0s"
        assert human_mode.serialize_opt(Duration(0)) == "0s"

    def test_present_values(self):
        assert HUMAN.deserialize_opt("1m 250ms") == Duration(60, 250_000_000)
        assert SECS.serialize_opt(Duration.from_millis(1234)) == 1

    def test_errors_propagate(self):
        with pytest.raises(UnknownUnitError, match="unknown unit"):
            HUMAN.deserialize_opt("3q")
        with pytest.raises(NegativeDurationError, match="negative"):
            SECS.deserialize_opt(-1)


class TestRootFunctions:
    def test_serialize_is_human(self, hms_250):
        assert pyextduration.serialize(hms_250) == "1h 2m 3s 250ms"

    def test_deserialize(self, hms_250):
        assert pyextduration.deserialize("1h 2m 3s 250ms") == hms_250

    def test_opt(self):
        assert pyextduration.serialize_opt(None) is None
        assert pyextduration.deserialize_opt(None) is None
        assert pyextduration.serialize_opt(Duration(5)) == "5s"
        assert pyextduration.deserialize_opt(5) == Duration(5)
