"""Domain packages for treeline."""
