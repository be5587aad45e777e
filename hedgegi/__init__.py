"""Stage file formats, archive tools, bake point generation and a state machine for global illumination workflows."""

__version__ = "0.1.0"