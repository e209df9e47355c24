import os
import sys
import argparse

from torrentinfo import __version__
from torrentinfo.bencoding import Decoder, BencodeError
from torrentinfo.render import TreeRenderer, SummaryView, Mode
from torrentinfo.torrent import Torrent, TorrentError
from torrentinfo.ui import TextStyler, InspectorUI
from torrentinfo.utils import logger


def build_parser():
    parser = argparse.ArgumentParser(
        prog="torrentinfo",
        description="Show information about a .torrent file.",
    )
    parser.add_argument("filename", nargs="?", help="path to the .torrent file")
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s v{__version__}",
                        help="Print version and quit")
    parser.add_argument("-n", "--nocolors", action="store_true", help="No ANSI colour")

    group = parser.add_mutually_exclusive_group()
    group.add_argument("-f", "--files", action="store_true", help="Show files within the torrent")
    group.add_argument("-d", "--detailed", action="store_true",
                       help="Show detailed information about the files")
    group.add_argument("-e", "--everything", action="store_true",
                       help="Print everything about the torrent")
    return parser


def select_mode(args):
    if args.detailed:
        return Mode.DETAILED
    if args.files:
        return Mode.FILES
    return Mode.COMPACT


def inspect(path, args, styler):
    """Reads and decodes the file, returning the rendered lines."""
    with open(path, 'rb') as f:
        data = f.read()

    if args.everything:
        return TreeRenderer(styler).render(Decoder(data).decode())

    torrent = Torrent.from_bytes(data)
    return SummaryView(styler).render(torrent, select_mode(args), title=os.path.basename(path))


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.filename is None:
        parser.print_usage()
        return 0

    styler = TextStyler(enabled=not args.nocolors)
    ui = InspectorUI(colors=not args.nocolors)

    try:
        lines = inspect(args.filename, args, styler)
    except (OSError, BencodeError, TorrentError) as e:
        logger.debug(f"Failed to read {args.filename}", exc_info=True)
        ui.print_log(f"{args.filename}: {e}", "ERROR")
        return 1

    for line in lines:
        print(line)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
