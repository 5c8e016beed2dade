# core/utils.py
import math
import random

from pathtracer.core.vector import Vector3

INFINITY = math.inf


def resolve_rng(rng=None):
    """
    Returns the given random source, or the module-level generator when the
    caller did not supply one. Workers always pass their own source.
    """
    return rng if rng is not None else random


def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x


def random_in_unit_sphere(rng=None) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    rng = resolve_rng(rng)
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p


def random_unit_vector(rng=None) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere(rng)
        if p.length_squared() > 1e-12:
            return p.normalize()


def random_in_unit_disk(rng=None) -> Vector3:
    """Random point in the unit disk on the z=0 plane, used for the lens."""
    rng = resolve_rng(rng)
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0)
        if p.dot(p) < 1:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with normal n (Snell's law).
    The caller is responsible for ruling out total internal reflection.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel


def schlick(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of the Fresnel reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
