"""Adapters layer - protocol front ends over the repository port."""
