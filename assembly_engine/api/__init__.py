"""Wire layer: pydantic models and adapters from domain values.

No HTTP server lives here; the transport collaborator serializes these
models however it routes requests.
"""
