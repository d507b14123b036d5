"""HTTP API exposing the latest Quini 6 results."""
