"""Identifier encoding used in AAS API paths and query strings."""

import base64

from basyx.aas import model


def base64url_encode(value: str) -> str:
    """Base64URL encode a string without padding, as the API expects for identifiers."""
    return base64.urlsafe_b64encode(value.encode("utf-8")).decode("ascii").rstrip("=")


def base64url_decode(value: str) -> str:
    """Inverse of base64url_encode; tolerates missing padding."""
    padded = value + "=" * (-len(value) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8")


def reference_value(reference: "str | model.Reference") -> str:
    """Return the identifying value of a reference.

    Plain strings are returned unchanged; for a Reference the value of
    its last key is used.
    """
    if isinstance(reference, str):
        return reference
    keys = tuple(reference.key)
    if not keys:
        raise ValueError("reference has no keys")
    return str(keys[-1].value)
