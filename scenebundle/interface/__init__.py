"""Mini README: Drivers (JSON service, shared wiring) for scenebundle.

Exports the FastAPI application factory and the coordinator builder the
CLI shares with it.
"""

from .web_app import create_application
from .wiring import build_coordinator

__all__ = ["build_coordinator", "create_application"]
