"""Session gating."""

from .gate import GateDecision, ISessionGate, PathKind, SessionGate, classify_path

__all__ = ["GateDecision", "ISessionGate", "PathKind", "SessionGate", "classify_path"]
