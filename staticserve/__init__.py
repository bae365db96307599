"""Minimal static file server for the ./public directory."""
