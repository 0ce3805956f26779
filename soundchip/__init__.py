"""Retro sound chip synthesis: channels, envelopes, noise, chip specs and presets."""

__version__ = "0.1.0"