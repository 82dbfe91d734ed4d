"""External Integrations."""
