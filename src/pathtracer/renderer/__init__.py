"""Integrator, render loop, tone mapping and image output."""
