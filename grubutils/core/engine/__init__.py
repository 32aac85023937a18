"""Engine — the command dispatcher."""
