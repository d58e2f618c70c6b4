"""
OTP Presets
===========
Named, pre-vetted OTP configurations.
"""

from enum import Enum
from typing import Dict, Union

from ..errors import InvalidPresetError
from .models import OTPConfig, OTPChannel


class PresetName(str, Enum):
    """Available OTP presets."""
    STANDARD = "standard"
    MOBILE_MONEY = "mobile_money"      # Critical payments
    HIGH_SECURITY = "high_security"


_PRESETS: Dict[PresetName, OTPConfig] = {
    PresetName.STANDARD: OTPConfig(
        expiry_seconds=600,
        max_attempts=5,
        resend_delay_seconds=60,
        channel=OTPChannel.EMAIL,
    ),
    PresetName.MOBILE_MONEY: OTPConfig(
        expiry_seconds=300,
        max_attempts=3,
        resend_delay_seconds=90,
        channel=OTPChannel.SMS,
    ),
    PresetName.HIGH_SECURITY: OTPConfig(
        expiry_seconds=300,
        max_attempts=3,
        resend_delay_seconds=120,
        channel=OTPChannel.PHONE,
    ),
}


def get_preset(name: Union[PresetName, str]) -> OTPConfig:
    """
    Look up a preset configuration.

    Raises:
        InvalidPresetError: If the name is not a known preset
    """
    try:
        key = PresetName(name)
    except ValueError:
        raise InvalidPresetError(str(name), [p.value for p in PresetName]) from None
    return _PRESETS[key]


def list_presets() -> Dict[str, OTPConfig]:
    """All presets keyed by name."""
    return {name.value: config for name, config in _PRESETS.items()}
