"""
Unit tests for score ratings and device emulation descriptions
"""
import pytest

from core.exceptions import ValidationError
from d3_formatting import calculate_rating, get_device_emulation_description


@pytest.mark.parametrize(
    "score,expected",
    [
        (0.0, "fail"),
        (0.10, "fail"),
        (0.45, "fail"),
        (0.5, "average"),
        (0.75, "average"),
        (0.80, "average"),
        (0.90, "pass"),
        (1.00, "pass"),
    ],
)
def test_calculates_score_ratings(score, expected):
    assert calculate_rating(score) == expected


@pytest.mark.parametrize(
    "score,mode,expected",
    [
        (None, "manual", "pass"),
        (None, "notApplicable", "pass"),
        (0.2, "manual", "pass"),
        (1, "error", "error"),
        (None, "error", "error"),
        (None, "binary", "fail"),
        (None, None, "fail"),
        (1, "binary", "pass"),
    ],
)
def test_rating_respects_display_mode(score, mode, expected):
    assert calculate_rating(score, mode) == expected


@pytest.mark.parametrize(
    "form_factor,expected",
    [
        ("none", "No emulation"),
        ("mobile", "Emulated Nexus 5X"),
        ("desktop", "Emulated Desktop"),
    ],
)
def test_builds_device_emulation_string(form_factor, expected):
    assert get_device_emulation_description({"emulatedFormFactor": form_factor}) == expected


def test_device_emulation_from_sample_result(sample_result):
    assert get_device_emulation_description(sample_result["configSettings"]) == "Emulated Nexus 5X"


@pytest.mark.parametrize("config_settings", [{}, {"emulatedFormFactor": "tablet"}])
def test_unknown_form_factor(config_settings):
    with pytest.raises(ValidationError) as exc_info:
        get_device_emulation_description(config_settings)

    assert exc_info.value.error_code == "VALIDATION_ERROR"
