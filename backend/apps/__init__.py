"""HTTP handlers grouped by domain."""
