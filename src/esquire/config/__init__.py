"""Configuration for the Esquire client."""

from esquire.config.settings import ClientSettings, ObservabilitySettings, Settings

__all__ = ["ClientSettings", "ObservabilitySettings", "Settings"]
