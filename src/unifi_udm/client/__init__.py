"""HTTP transport, authentication and resource operations."""
