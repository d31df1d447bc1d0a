"""Integration tests wiring the session to the HTTP gateway."""
