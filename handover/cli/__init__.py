"""Command line client for the handover API."""
