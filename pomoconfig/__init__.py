"""PomoConfig: Pomodoro timer configuration with validation and preview."""

__version__ = "0.1.0"
