"""Cache adapters."""
