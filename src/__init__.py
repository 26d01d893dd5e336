"""Household proration package."""
