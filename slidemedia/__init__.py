from slidemedia.pptx_extract import extract_slide_images
from slidemedia.manifest import build_manifest, write_manifest

__all__ = ["extract_slide_images", "build_manifest", "write_manifest"]
