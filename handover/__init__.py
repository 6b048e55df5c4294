"""Merchant onboarding tracker: sales intake and launch handoff checklists."""

__version__ = "0.1.0"
