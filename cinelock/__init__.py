"""CineLock seat lock simulation."""
