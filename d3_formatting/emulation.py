"""
Device emulation descriptions
"""

from typing import Any, Dict

from core.exceptions import ValidationError

DEVICE_EMULATION_DESCRIPTIONS = {
    "none": "No emulation",
    "mobile": "Emulated Nexus 5X",
    "desktop": "Emulated Desktop",
}


def get_device_emulation_description(config_settings: Dict[str, Any]) -> str:
    """
    Describe the device emulation used for an audit run

    Args:
        config_settings: The run's `configSettings`, read for `emulatedFormFactor`

    Returns:
        Human-readable emulation label

    Raises:
        ValidationError: If the form factor is not recognized
    """
    form_factor = config_settings.get("emulatedFormFactor")
    try:
        return DEVICE_EMULATION_DESCRIPTIONS[form_factor]
    except KeyError:
        raise ValidationError(
            f"Unsupported emulated form factor: {form_factor!r}", field="emulatedFormFactor"
        ) from None
