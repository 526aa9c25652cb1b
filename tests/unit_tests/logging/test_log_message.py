"""
LogMessage unit tests.
"""

from __future__ import annotations

import dataclasses

import pytest

from nuclei_diagnostics.logging import (
    INVARIANT_CULTURE,
    LevelToLog,
    LogMessage,
    ValidationError,
)
from nuclei_diagnostics.logging.formatting import CurrentLocaleFormatProvider


class TestCreate:
    def test_create(self) -> None:
        message = LogMessage(LevelToLog.DEBUG, "text")

        assert message.format_parameters == ()
        assert message.format_provider is INVARIANT_CULTURE
        assert message.has_additional_information is False
        assert message.level == LevelToLog.DEBUG
        assert len(message.properties) == 0
        assert message.text == "text"

    def test_create_with_format_parameters(self) -> None:
        message = LogMessage(LevelToLog.DEBUG, "text", [10])

        assert message.format_parameters == (10,)
        assert message.format_provider == INVARIANT_CULTURE
        assert message.has_additional_information is False

    def test_create_with_format_provider_and_parameters(self) -> None:
        provider = CurrentLocaleFormatProvider()
        message = LogMessage(LevelToLog.DEBUG, "text", (10,), provider)

        assert message.format_parameters[0] == 10
        assert message.format_provider is provider
        assert message.text == "text"

    def test_create_with_properties(self) -> None:
        properties = {"Key": 10}
        message = LogMessage(LevelToLog.DEBUG, "text", properties=properties)

        assert message.has_additional_information is True
        assert dict(message.properties) == properties
        assert message.format_parameters == ()

    def test_create_with_level_none(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            LogMessage(LevelToLog.NONE, "x")
        assert excinfo.value.argument == "level"
        assert excinfo.value.code == "INVALID_ARGUMENT"

    def test_create_with_missing_level(self) -> None:
        with pytest.raises(ValidationError):
            LogMessage(None, "x")

    def test_create_with_missing_text(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            LogMessage(LevelToLog.INFO, None)
        assert excinfo.value.argument == "text"

    def test_validation_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            LogMessage(LevelToLog.NONE, "x")

    def test_empty_text_is_allowed(self) -> None:
        assert LogMessage(LevelToLog.INFO, "").text == ""


class TestImmutability:
    def test_attributes_are_frozen(self) -> None:
        message = LogMessage(LevelToLog.INFO, "text")
        with pytest.raises(dataclasses.FrozenInstanceError):
            message.text = "other"

    def test_properties_are_a_snapshot(self) -> None:
        properties = {"request_id": "abc"}
        message = LogMessage(LevelToLog.INFO, "text", properties=properties)

        properties["request_id"] = "changed"
        properties["extra"] = 1

        assert dict(message.properties) == {"request_id": "abc"}

    def test_properties_are_read_only(self) -> None:
        message = LogMessage(LevelToLog.INFO, "text", properties={"a": 1})
        with pytest.raises(TypeError):
            message.properties["a"] = 2


class TestRender:
    def test_render_without_parameters_keeps_braces(self) -> None:
        assert LogMessage(LevelToLog.INFO, "json {x}").render() == "json {x}"

    def test_render_with_parameters(self) -> None:
        message = LogMessage(LevelToLog.INFO, "Loaded {0} plugins from {1}", (3, "plugins/"))
        assert message.render() == "Loaded 3 plugins from plugins/"

    def test_single_string_parameter_is_not_split(self) -> None:
        message = LogMessage(LevelToLog.INFO, "{0}", "abc")
        assert message.format_parameters == ("abc",)
        assert message.render() == "abc"
