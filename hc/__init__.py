"""HC - a local HTTP client with a browser-based UI."""
