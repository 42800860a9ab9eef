"""Infrastructure: completion client, caches and logging."""
