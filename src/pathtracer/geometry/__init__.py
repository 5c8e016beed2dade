"""Hittable geometry, structural decorators, media and the BVH."""
