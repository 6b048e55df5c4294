"""HTTP API for the handover tracker."""
