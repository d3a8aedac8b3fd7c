import os
import shutil

from slidemedia.archive import list_slides, unpacked_presentation
from slidemedia.manifest import probe_image_size, write_manifest
from slidemedia.relationships import iter_image_references, load_image_relationships


def default_output_dir(pptx_path):
    stem = os.path.splitext(os.path.basename(pptx_path))[0]
    return os.path.join(os.getcwd(), stem)


def output_filename(slide_number, sequence, source_path, slide_width=2):
    ext = os.path.splitext(source_path)[1]
    return f"slide{slide_number:0{slide_width}d}_{sequence:02d}{ext}"


def _too_small(width, height, min_width, min_height):
    # Sizes Pillow cannot read are never filtered
    if width is None or height is None:
        return False
    return width < min_width or height < min_height


def extract_slide_images(pptx_path, output_dir=None, min_width=0, min_height=0, with_sizes=False, manifest=False):
    """
    Copies every embedded slide image out of a presentation, named by slide and order.

    Images are taken in the order their references first appear on each slide and
    saved as slide<NN>_<MM>.<ext>. Existing files of the same name are overwritten.

    Parameters:
        pptx_path (str): .pptx / .pptm file path
        output_dir (str): Destination folder (default: ./<presentation name>)
        min_width (int): Minimum image width to include
        min_height (int): Minimum image height to include
        with_sizes (bool): Fill Width/Height in the records (always on with a size filter or manifest)
        manifest (bool): Also write manifest.csv to the destination folder

    Returns:
        List of extraction records, one dict per copied file
    """
    output_dir = output_dir or default_output_dir(pptx_path)
    probe_sizes = with_sizes or manifest or min_width > 0 or min_height > 0
    extracted = []

    with unpacked_presentation(pptx_path) as slides_dir:
        os.makedirs(output_dir, exist_ok=True)
        package_root = os.path.dirname(os.path.dirname(slides_dir))
        slides = list_slides(slides_dir)
        slide_width = max(2, len(str(len(slides))))

        for slide_number, slide_path in slides:
            rels = load_image_relationships(slide_path)
            if not rels:
                continue

            image_index = 0
            for rel_id, media_path in iter_image_references(slide_path, rels):
                if not os.path.isfile(media_path):
                    continue

                width, height = probe_image_size(media_path) if probe_sizes else (None, None)
                if _too_small(width, height, min_width, min_height):
                    continue

                image_index += 1
                name = output_filename(slide_number, image_index, media_path, slide_width)
                shutil.copyfile(media_path, os.path.join(output_dir, name))
                extracted.append({
                    "Slide": slide_number,
                    "Sequence": image_index,
                    "Relationship_ID": rel_id,
                    "Source": os.path.relpath(media_path, package_root).replace(os.sep, "/"),
                    "Filename": name,
                    "Width": width,
                    "Height": height,
                })

            if image_index:
                print(f"Slide {slide_number}: {image_index} image(s)")

    if manifest:
        print(f"Manifest saved to: {write_manifest(extracted, output_dir)}")
    print(f"Done. Extracted {len(extracted)} image(s) to: {output_dir}")
    return extracted
