"""Testing helpers – Hypothesis strategies for Optional values.

Import from :mod:`mp_optional.testing.strategies`; hypothesis is only needed
when a strategy is actually built.
"""
