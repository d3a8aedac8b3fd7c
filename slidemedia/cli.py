import argparse
import sys

from slidemedia.pptx_extract import extract_slide_images


def build_parser():
    parser = argparse.ArgumentParser(description="Extract slide images from a PowerPoint file, named by slide and order")
    parser.add_argument("input", help="Path to .pptx / .pptm file")
    parser.add_argument("output", nargs="?", default=None,
                        help="Output directory (default: ./<presentation name>)")
    parser.add_argument("--manifest", action="store_true", help="Also write manifest.csv to the output directory")
    parser.add_argument("--min_width", type=int, default=0)
    parser.add_argument("--min_height", type=int, default=0)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        extract_slide_images(args.input, args.output, min_width=args.min_width,
                             min_height=args.min_height, manifest=args.manifest)
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ {e}", file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
