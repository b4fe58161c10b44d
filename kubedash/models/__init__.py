"""Data models for kubedash."""
