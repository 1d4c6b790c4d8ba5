"""Factory for endpoints whose upstream integration is not wired yet."""
from typing import Callable, Dict


def pending_message(name: str) -> Dict[str, str]:
    return {"message": f"{name} endpoint - implementation pending"}


def pending_endpoint(name: str) -> Callable[[], Dict[str, str]]:
    def _handler() -> Dict[str, str]:
        return pending_message(name)

    _handler.__name__ = "pending_" + name.lower().replace(" ", "_")
    _handler.__doc__ = f"{name} (implementation pending)."
    return _handler
