"""Hook command implementations."""
