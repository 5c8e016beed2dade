"""Vectors, rays, bounding boxes, sampling helpers and render settings."""
