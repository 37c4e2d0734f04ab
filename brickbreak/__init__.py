"""Terminal brick-breaking game with single, battle and computer-versus-computer modes."""

__version__ = "1.0.0"