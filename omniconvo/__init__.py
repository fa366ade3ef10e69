"""OmniConvo - save AI chat transcripts and share them by permalink."""

__version__ = "1.0.0"
