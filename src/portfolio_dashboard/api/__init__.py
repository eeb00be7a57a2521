"""REST client layer: HTTP transport, endpoint groups and wire schemas."""
