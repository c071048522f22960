"""Application layer - client code driving the factories."""

from .client import client_code, run_demo

__all__ = ["client_code", "run_demo"]
