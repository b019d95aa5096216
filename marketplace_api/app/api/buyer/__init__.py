"""Buyer-facing endpoints."""
