# camera/camera.py
import math

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk, resolve_rng
from pathtracer.core.vector import Vector3


class Camera:
    """
    Look-at camera with a thin lens and an open shutter over [time0, time1].
    ``vfov`` is the vertical field of view in degrees.
    """
    def __init__(self, lookfrom: Vector3, lookat: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 10.0, time0: float = 0.0, time1: float = 0.0):
        self.position = lookfrom
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1

        # Orthonormal basis: forward looks at the target, right and up span the image plane.
        self.forward = (lookat - lookfrom).normalize()
        self.right = self.forward.cross(vup).normalize()
        self.up = self.right.cross(self.forward)

        viewport_height = 2.0 * math.tan(math.radians(vfov) / 2)
        viewport_width = aspect_ratio * viewport_height

        # Scale by focus distance
        self.horizontal = self.right * viewport_width * focus_dist
        self.vertical = self.up * viewport_height * focus_dist

        self.lower_left_corner = (self.position +
                                  self.forward * focus_dist -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5)

    def get_ray(self, s: float, t: float, rng=None) -> Ray:
        """Ray through image-plane coordinate (s, t) in [0, 1]^2."""
        rng = resolve_rng(rng)
        if self.lens_radius > 0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            offset = self.right * rd.x + self.up * rd.y
        else:
            offset = Vector3(0, 0, 0)

        ray_origin = self.position + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        time = rng.uniform(self.time0, self.time1) if self.time1 > self.time0 else self.time0
        return Ray(ray_origin, ray_direction, time)
