"""Stochastic path tracer.

Subpackages:
    core: vectors, rays, bounding boxes, sampling helpers and render settings
    camera: thin-lens look-at camera
    geometry: hittable primitives, decorators, participating media and the BVH
    materials: scattering/emitting materials and textures
    renderer: the path-tracing integrator, tone mapping and image output
"""

__version__ = "0.1.0"
