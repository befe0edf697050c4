"""Service description interface (``/description``)."""

from __future__ import annotations

from typing import Any

from aas_api_client import codec
from aas_api_client.exceptions import InvalidPayloadError
from aas_api_client.interfaces.base import BaseInterface


def _to_profiles(data: Any) -> list[str]:
    # Older servers answer with a bare array instead of {"profiles": [...]}.
    profiles = data.get("profiles", []) if isinstance(data, dict) else data
    if not isinstance(profiles, list):
        raise InvalidPayloadError("'profiles' must be an array")
    return [codec.to_string(profile) for profile in profiles]


class DescriptionInterface(BaseInterface):
    API_PATH = "/description"

    def get(self) -> list[str]:
        """Service specification profiles the server implements."""
        return self._get(None, _to_profiles)
