"""Python client for the UniFi Dream Machine network API."""
