"""Infrastructure - process-level concerns (logging) kept out of core/."""
