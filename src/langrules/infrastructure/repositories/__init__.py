"""Rule storage adapters."""
