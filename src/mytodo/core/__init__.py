"""Ports, interaction controller, daily quote banner and application state."""
