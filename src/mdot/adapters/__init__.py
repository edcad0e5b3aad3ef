"""Adapters that feed the planning core."""
