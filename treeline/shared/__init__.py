"""Shared infrastructure for treeline."""
