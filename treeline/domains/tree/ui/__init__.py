"""Terminal rendering for tree views."""
