"""Tests for field options, scalar kinds, flag records and errors."""

import dataclasses
from dataclasses import dataclass
from datetime import timedelta

import pytest
from pydantic import ValidationError

from envflags.errors import EnvFlagsError, ParseError
from envflags.types import IGNORE, FieldOptions, FieldRef, Flag, Int64, ScalarKind, setting
from envflags.types.options import METADATA_KEY


class TestFieldOptions:
    """Tests for FieldOptions."""

    def test_defaults(self):
        options = FieldOptions()
        assert options.flag is None
        assert options.env is None
        assert options.usage == ""
        assert not options.ignored
        assert not options.env_disabled

    def test_ignore_sentinel(self):
        assert FieldOptions(flag=IGNORE).ignored
        assert FieldOptions(env=IGNORE).env_disabled

    def test_from_empty_mapping(self):
        assert FieldOptions.from_mapping(None) == FieldOptions()
        assert FieldOptions.from_mapping({}) == FieldOptions()

    def test_from_plain_keys(self):
        options = FieldOptions.from_mapping({"flag": "key", "env": "API_KEY", "usage": "api key"})
        assert options == FieldOptions(flag="key", env="API_KEY", usage="api key")

    def test_from_metadata_key(self):
        stored = FieldOptions(flag="-")
        assert FieldOptions.from_mapping({METADATA_KEY: stored}) is stored

    def test_frozen(self):
        with pytest.raises(ValidationError):
            FieldOptions().flag = "x"


class TestSetting:
    """Tests for the setting() field helper."""

    def test_metadata(self):
        @dataclass
        class Config:
            port: int = setting(8080, flag="p", usage="listen port")

        (port,) = dataclasses.fields(Config)
        assert port.default == 8080
        assert port.metadata[METADATA_KEY] == FieldOptions(flag="p", usage="listen port")

    def test_default_factory(self):
        @dataclass
        class Config:
            tags: dict = setting(default_factory=dict, flag="-")

        assert Config().tags == {}


class TestScalarKind:
    """Tests for ScalarKind."""

    @pytest.mark.parametrize(
        "annotation,kind",
        [
            (int, ScalarKind.INT),
            (Int64, ScalarKind.INT64),
            (float, ScalarKind.FLOAT),
            (str, ScalarKind.STRING),
            (bool, ScalarKind.BOOL),
            (timedelta, ScalarKind.DURATION),
        ],
    )
    def test_from_annotation(self, annotation, kind):
        assert ScalarKind.from_annotation(annotation) is kind

    @pytest.mark.parametrize("annotation", [bytes, list[int], complex, object, None])
    def test_unsupported_annotation(self, annotation):
        assert ScalarKind.from_annotation(annotation) is None

    @pytest.mark.parametrize(
        "kind,value,text",
        [
            (ScalarKind.BOOL, True, "true"),
            (ScalarKind.BOOL, False, "false"),
            (ScalarKind.DURATION, timedelta(minutes=5), "5m0s"),
            (ScalarKind.FLOAT, 2, "2.0"),
            (ScalarKind.INT, 42, "42"),
            (ScalarKind.STRING, "svc", "svc"),
        ],
    )
    def test_render(self, kind, value, text):
        assert kind.render(value) == text


@dataclass
class Holder:
    port: int = 0


class TestFlag:
    """Tests for Flag and FieldRef."""

    def test_field_ref(self):
        holder = Holder()
        ref = FieldRef(holder, "port")
        ref.set(9)
        assert ref.get() == 9
        assert ref.path == "port"

    def test_flag_reads_through_ref(self):
        holder = Holder()
        flag = Flag(
            name="port",
            kind=ScalarKind.INT,
            default=8080,
            ref=FieldRef(holder, "port", "server.port"),
        )
        holder.port = 1
        assert flag.value == 1
        assert flag.path == "server.port"
        assert flag.default_text == "8080"
        assert "ref" not in flag.model_dump()


class TestErrors:
    """Tests for the error trail."""

    def test_context_order(self):
        error = ParseError("bad value")
        error.add_context("port")
        error.add_context("server")
        assert error.fields == ["server", "port"]
        assert str(error) == "field server: field port: bad value"

    def test_hierarchy(self):
        assert issubclass(ParseError, EnvFlagsError)
        assert str(EnvFlagsError("plain")) == "plain"
