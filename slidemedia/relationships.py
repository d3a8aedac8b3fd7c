import os
from lxml import etree
from pptx.opc.constants import RELATIONSHIP_TYPE as RT
from pptx.oxml.ns import qn

PACKAGE_RELS_NS = "http://schemas.openxmlformats.org/package/2006/relationships"
IMAGE_RELATIONSHIP_TYPES = (
    RT.IMAGE,
    "http://purl.oclc.org/ooxml/officeDocument/relationships/image",
)

_parser = etree.XMLParser(resolve_entities=False, no_network=True)


def rels_path_for(slide_path):
    slides_dir, name = os.path.split(slide_path)
    return os.path.join(slides_dir, "_rels", name + ".rels")


def resolve_target(slides_dir, target):
    # Leading "/" is relative to the package root, i.e. two levels above ppt/slides
    if target.startswith("/"):
        package_root = os.path.dirname(os.path.dirname(slides_dir))
        return os.path.normpath(os.path.join(package_root, target.lstrip("/")))
    return os.path.normpath(os.path.join(slides_dir, target))


def load_image_relationships(slide_path):
    """
    Maps relationship id -> absolute media path for a slide's image relationships.

    A slide without a .rels file has no images; an empty dict is returned.
    """
    rels_path = rels_path_for(slide_path)
    if not os.path.isfile(rels_path):
        return {}

    slides_dir = os.path.dirname(slide_path)
    root = etree.parse(rels_path, _parser).getroot()
    rels = {}
    for rel in root.iter(f"{{{PACKAGE_RELS_NS}}}Relationship"):
        if rel.get("Type") not in IMAGE_RELATIONSHIP_TYPES:
            continue
        if rel.get("TargetMode") == "External":
            continue  # linked, not embedded
        rel_id, target = rel.get("Id"), rel.get("Target")
        if not rel_id or not target:
            continue
        rels[rel_id] = resolve_target(slides_dir, target)
    return rels


def iter_image_references(slide_path, rels):
    """
    Yields (rel_id, media_path) for each distinct image reference in document order.

    Repeated ids are reported once, at their first occurrence. Ids with no
    image relationship are dropped.
    """
    root = etree.parse(slide_path, _parser).getroot()
    seen = set()
    for blip in root.iter(qn("a:blip")):
        rel_id = blip.get(qn("r:embed"))
        if not rel_id or rel_id in seen:
            continue
        seen.add(rel_id)
        media_path = rels.get(rel_id)
        if media_path is None:
            continue
        yield rel_id, media_path
