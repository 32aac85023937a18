"""Core — models, settings, services and the command dispatcher."""
