import argparse
import os
import sys
from typing import List

from converter.constants import CONVERSION_MODES
from converter.config import DEFAULT_CONVERSION_MODE
from converter.dto.conversion_dto import FileUploadDTO, FileConversionErrorDTO
from converter.services import conversion_service
from converter.services.text_transform_service import TextTransformError
from converter.utils.utils import load_bytes, save_bytes, get_file_names


def collect_paths(paths: List[str]) -> List[str]:
    """Expands directories into the files they contain (not recursive)."""
    collected = []
    for path in paths:
        if os.path.isdir(path):
            collected.extend(os.path.join(path, name) for name in sorted(get_file_names(path)))
        else:
            collected.append(path)
    return collected


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='converter',
        description="Converts the text of PNG character cards and JSON documents with OpenCC."
    )
    parser.add_argument('paths', nargs='+', help="PNG or JSON files, or folders containing them.")
    parser.add_argument('--mode', choices=CONVERSION_MODES, default=DEFAULT_CONVERSION_MODE,
                        help=f"Conversion mode (default: {DEFAULT_CONVERSION_MODE}).")
    parser.add_argument('--out', default=None,
                        help="Output folder. Defaults to the folder of each input file.")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    uploads = []
    for path in collect_paths(args.paths):
        try:
            uploads.append(FileUploadDTO(file_name=path, content=load_bytes(path)))
        except OSError as e:
            print(f"Cannot read {path}: {e}", file=sys.stderr)

    if not uploads:
        print("No files to convert.", file=sys.stderr)
        return 1

    print(f"INFO: Converting {len(uploads)} files (mode: {args.mode})...")
    try:
        result = conversion_service.convert_files(uploads, args.mode)
    except TextTransformError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.out:
        os.makedirs(args.out, exist_ok=True)
    for converted in result.converted:
        folder = args.out or os.path.dirname(converted.file_name)
        output_path = os.path.join(folder, converted.output_name)
        try:
            save_bytes(converted.content, output_path)
            print(f"Converted: {converted.file_name} -> {output_path}")
        except OSError as e:
            print(f"Cannot write {output_path}: {e}", file=sys.stderr)
            result.errors.append(FileConversionErrorDTO(
                file_name=converted.file_name, error=str(e)
            ))

    for error in result.errors:
        print(f"Failed: {error.file_name}: {error.error}", file=sys.stderr)

    print("INFO: All files processed.")
    return 1 if result.errors else 0


if __name__ == '__main__':
    sys.exit(main())
