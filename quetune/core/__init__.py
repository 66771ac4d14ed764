"""Core logic: playlist, explorer, player state machine and engine."""
