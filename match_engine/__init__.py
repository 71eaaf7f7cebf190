"""Quiz compatibility matching engine."""
