# materials/texture_loader.py
import os

from PIL import UnidentifiedImageError

from pathtracer.materials.textures import ImageTexture


def load_texture(image_path: str) -> ImageTexture:
    """
    Decode an image file into an ImageTexture.

    A missing file raises FileNotFoundError; a file Pillow cannot decode
    raises ValueError. Scenes never substitute a placeholder texture.
    """
    if not os.path.isfile(image_path):
        raise FileNotFoundError(f"Texture image {image_path!r} does not exist")
    try:
        return ImageTexture.from_file(image_path)
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError(f"Could not decode texture image {image_path!r}: {e}") from e


def create_image_material(image_path: str, material_class, **material_params):
    """Instantiate ``material_class`` with the image at ``image_path`` as its texture."""
    return material_class(load_texture(image_path), **material_params)
