"""Sequencer editor model: synth settings, controller input, menu grids and recorded rendering."""

__version__ = "0.1.0"
__all__ = ["app", "input", "menu", "render", "synth", "ui_elements"]