"""Matplotlib rendering of chart scenes."""
