"""Application layer - Orchestration of the decision engine over ports.

Services here fetch policies and stored tallies through ports, call the
pure domain services, and store the results. They contain no decision
rules of their own.
"""
