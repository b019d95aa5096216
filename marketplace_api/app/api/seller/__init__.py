"""Seller-facing endpoints."""
