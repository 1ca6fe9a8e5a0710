"""
Assembly Engine - Governance decision engine for general meetings.

Computes whether motions put to a governed assembly (shareholder or
association general meeting) are adopted or rejected, under the quorum
and majority rules configured for the meeting or the motion itself.

Layers:
- domain: pure policy resolution, evaluators, tally reconciliation,
  decision consolidation and lifecycle state machines
- application: async orchestration over persistence ports
- infrastructure: logging configuration and in-memory stubs
- api: pydantic wire models for the transport collaborator
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
