import os
import re
import shutil
import tempfile
import zipfile
from contextlib import contextmanager

ACCEPTED_EXTENSIONS = (".pptx", ".pptm")
SLIDE_NAME_PATTERN = re.compile(r"^slide(\d+)\.xml$")


def validate_archive_path(pptx_path):
    if not os.path.isfile(pptx_path):
        raise FileNotFoundError(f"Presentation not found: {pptx_path}")
    ext = os.path.splitext(pptx_path)[1].lower()
    if ext not in ACCEPTED_EXTENSIONS:
        raise ValueError(f"Unsupported file type '{ext or pptx_path}': expected one of {', '.join(ACCEPTED_EXTENSIONS)}")


@contextmanager
def unpacked_presentation(pptx_path):
    """
    Unzips a presentation into a scratch directory and yields its slide folder.

    The scratch directory is removed on exit, whether or not the body raised.

    Parameters:
        pptx_path (str): .pptx / .pptm file path

    Yields:
        Absolute path of the unpacked ppt/slides directory
    """
    validate_archive_path(pptx_path)
    scratch_dir = tempfile.mkdtemp(prefix="slidemedia_")
    try:
        try:
            with zipfile.ZipFile(pptx_path) as z:
                z.extractall(scratch_dir)
        except zipfile.BadZipFile:
            raise ValueError(f"Not a valid presentation archive: {pptx_path}")

        slides_dir = os.path.join(scratch_dir, "ppt", "slides")
        if not os.path.isdir(slides_dir):
            raise ValueError(f"No ppt/slides directory found in: {pptx_path}")
        yield slides_dir
    finally:
        shutil.rmtree(scratch_dir, ignore_errors=True)


def list_slides(slides_dir):
    """Returns (slide_number, slide_path) pairs sorted by slide number."""
    slides = []
    for name in os.listdir(slides_dir):
        match = SLIDE_NAME_PATTERN.match(name)
        if not match:
            continue
        slides.append((int(match.group(1)), os.path.join(slides_dir, name)))
    return sorted(slides)
