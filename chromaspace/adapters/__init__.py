from .pillow import rgb_color_from_pixel, rgb_color_from_image, rgb_color_from_string

__all__ = ["rgb_color_from_pixel", "rgb_color_from_image", "rgb_color_from_string"]
