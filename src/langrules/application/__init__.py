"""Application layer: ports, configuration and rule engine services."""
