"""Synthetic graph generation and visualization helpers."""
