"""Runtime layer: REST runners, transports and pagination."""
