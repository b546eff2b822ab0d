from typing import Any, Dict

SENSITIVE_KEYS = ("password", "secret", "token")


def _mask(value: str) -> str:
    # length is not revealed
    return f"{value[:2]}***" if len(value) > 6 else "***"


def mask_sensitive_values(data: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of a flat config dict with secret-looking string values masked."""
    return {
        k: _mask(v) if isinstance(v, str) and any(s in k.lower() for s in SENSITIVE_KEYS) else v
        for k, v in data.items()
    }
