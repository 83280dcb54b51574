"""Rule-based shopping assistant."""
