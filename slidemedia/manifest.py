import os
import pandas as pd
from PIL import Image, UnidentifiedImageError

MANIFEST_NAME = "manifest.csv"
MANIFEST_COLUMNS = ["Slide", "Sequence", "Relationship_ID", "Source", "Filename", "Width", "Height"]


def probe_image_size(path):
    """Pixel (width, height) of an image, or (None, None) if Pillow can't read it (EMF, SVG, corrupt, oversized)."""
    try:
        with Image.open(path) as img:
            return img.width, img.height
    except (UnidentifiedImageError, OSError, Image.DecompressionBombError):
        return None, None


def build_manifest(records):
    return pd.DataFrame(records, columns=MANIFEST_COLUMNS)


def write_manifest(records, output_dir):
    """
    Saves extraction records as a CSV table next to the extracted images.

    Parameters:
        records (list of dict): Rows returned by extract_slide_images
        output_dir (str): Destination folder

    Returns:
        Path of the written CSV
    """
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, MANIFEST_NAME)
    build_manifest(records).to_csv(path, index=False)
    return path
