"""Look-at camera with a thin lens and shutter interval."""
