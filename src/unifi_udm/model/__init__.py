"""Typed dataclass models for UDM API objects."""
