"""Scalar math primitives and the encoded polyline codec."""
