import sys
import logging
import argparse
from pathlib import Path, PurePosixPath
from urllib.parse import urlsplit

import pngme
from .chunk import Chunk
from .chunk_type import ChunkType
from .pngexceptions import PngMeException


log = logging.getLogger("pngme")


def get_parser():
    parser = argparse.ArgumentParser(
        prog="pngme",
        description="Hide messages in PNG files",
    )
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print debug information")
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    encode = subparsers.add_parser("encode", help="Hide a message in a new chunk")
    encode.add_argument("-i", "--input", required=True, help="Input PNG file path or URL")
    encode.add_argument("-c", "--chunk-type", required=True, help="Chunk type to encode")
    encode.add_argument("-s", "--secret", required=True, help="Secret message to encode")
    encode.add_argument("-o", "--output",
                        help="Output file path [default: input with a .pngme suffix, "
                             "in the current directory for a URL]")
    encode.add_argument("--index", type=int,
                        help="Index to insert the chunk at [default: append it]")

    decode = subparsers.add_parser("decode", help="Print the message hidden in a chunk")
    decode.add_argument("-i", "--input", required=True, help="Input PNG file path or URL")
    decode.add_argument("-c", "--chunk-type", required=True, help="Chunk type to decode")

    print_ = subparsers.add_parser("print", help="Print every chunk of a PNG file")
    print_.add_argument("-i", "--input", required=True, help="Input PNG file path or URL")

    remove = subparsers.add_parser("remove", help="Remove the first chunk of a type")
    remove.add_argument("-i", "--input", required=True,
                        help="Input PNG file path, or URL if --output is given")
    remove.add_argument("-c", "--chunk-type", required=True, help="Chunk type to remove")
    remove.add_argument("-o", "--output",
                        help="Output file path [default: overwrite input, required for a URL]")

    return parser


def default_output(source):
    """
    :returns: where encode writes when no output is given:
        next to the input file, or in the current directory for a URL.
    """
    if pngme.is_url(source):
        name = PurePosixPath(urlsplit(source).path).name
        if name in ('', '.', '..'):
            name = "image"
        return Path(name).with_suffix(".pngme")
    return Path(source).with_suffix(".pngme")


def encode(args) -> int:
    chunk_type = ChunkType.parse_str(args.chunk_type)
    png = pngme.open(args.input)
    chunk = Chunk(chunk_type, args.secret.encode('utf-8'))
    if args.index is None:
        png.append_chunk(chunk)
    else:
        png.insert_chunk(args.index, chunk)
    output = args.output or default_output(args.input)
    log.debug("Writing %d chunks to %s", len(png), output)
    png.save(output)
    print("Encoded message in a '{}' chunk, saved to {}".format(chunk_type, output))
    return 0


def decode(args) -> int:
    png = pngme.open(args.input)
    chunk = png.chunk_by_type(args.chunk_type)
    if chunk is None:
        print("No chunk of type '{}' found in the PNG file.".format(args.chunk_type),
              file=sys.stderr)
        return 1
    print("Decoded message: {}".format(chunk.data.decode('utf-8', errors='replace')))
    return 0


def print_chunks(args) -> int:
    png = pngme.open(args.input)
    for chunk in png.chunks:
        print(chunk)
        print('=' * 50)
    return 0


def remove(args) -> int:
    if args.output is None and pngme.is_url(args.input):
        print("error: cannot overwrite {}, give an --output path".format(args.input),
              file=sys.stderr)
        return 1
    png = pngme.open(args.input)
    png.remove_first_chunk(args.chunk_type)
    output = args.output or args.input
    log.debug("Writing %d chunks to %s", len(png), output)
    png.save(output)
    print("Removed first chunk of type '{}'".format(args.chunk_type))
    return 0


_COMMANDS = {
    "encode": encode,
    "decode": decode,
    "print": print_chunks,
    "remove": remove,
}


def main(argv=None) -> int:
    parser = get_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return _COMMANDS[args.command](args)
    except PngMeException as e:
        log.debug("%s failed", args.command, exc_info=True)
        print("error: {}".format(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
