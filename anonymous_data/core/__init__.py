"""
Core resolution engine for Anonymous Data.

Contains the engine, the per-request resolution context, the populator,
the explicit resolution result type, and the collaborator protocols.
"""
