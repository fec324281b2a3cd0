"""
Conftest for property-based tests.

These tests only need the codec, no CLI fixtures.
"""

from hypothesis import Verbosity, settings

settings.register_profile("dev", max_examples=50, verbosity=Verbosity.verbose)
settings.register_profile("ci", max_examples=200)
settings.load_profile("dev")
