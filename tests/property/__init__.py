"""
Property-based testing suite for Anonymous Data.

Uses Hypothesis to check that generated values stay reproducible and within
their declared bounds for arbitrary seeds and ranges.
"""
