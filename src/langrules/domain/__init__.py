"""Domain layer: rules, rule kinds and errors."""
