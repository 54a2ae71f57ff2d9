"""Static constants shared across brandaudit modules."""
