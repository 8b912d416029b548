"""Spherical geometry: headings, distances, offsets, lengths and areas."""
