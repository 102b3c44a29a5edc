import argparse
import sys

from . import __version__
from .convert import create_bitmap_files, create_code_file
from .errors import EXIT_IO, EXIT_NOT_FOUND, BitmapUtilityError

EXIT_USAGE = 2


class CommandLineError(Exception):
    pass


class ArgumentParser(argparse.ArgumentParser):
    """Parser that raises instead of printing usage to stderr and exiting."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("add_help", False)
        super().__init__(*args, **kwargs)
        self.add_argument("-?", "-h", "--help", action="help",
                          help="Show help information")

    def error(self, message):
        raise CommandLineError(message)


def resolve_path(argument, option):
    # Exactly one of the two may be given; both or neither leaves it unset
    if argument is not None and option is None:
        return argument
    if argument is None and option is not None:
        return option
    return None


def build_parser():
    parser = ArgumentParser(
        prog="bitmap-utility",
        description="Convert bitmap files to C byte-array code and back.")
    parser.add_argument("-v", "--version", action="version",
                        version=f"Version {__version__}",
                        help="Show version information")
    commands = parser.add_subparsers(dest="command", metavar="command")

    bitmaps = commands.add_parser(
        "createBitmaps", help="Create bitmap files from code folder.",
        description="Create bitmap files from code folder.")
    bitmaps.add_argument("code", nargs="?", help="Code folder path")
    bitmaps.add_argument("output", nargs="?", help="Output folder path")
    bitmaps.add_argument("-c", "--code", dest="code_option", metavar="PATH",
                         help="Code folder path")
    bitmaps.add_argument("-o", "--output", dest="output_option", metavar="PATH",
                         help="Output folder path")
    bitmaps.add_argument("-r", "--replace", action="store_true",
                         help="Replace existing files")
    bitmaps.set_defaults(func=run_create_bitmaps, command_parser=bitmaps,
                         paths=("code", "output"))

    code = commands.add_parser(
        "createCode", help="Create code file from bitmap file.",
        description="Create code file from bitmap file.")
    code.add_argument("bitmap", nargs="?", help="Bitmap file path")
    code.add_argument("output", nargs="?", help="Output file path")
    code.add_argument("-b", "--bitmap", dest="bitmap_option", metavar="PATH",
                      help="Bitmap file path")
    code.add_argument("-o", "--output", dest="output_option", metavar="PATH",
                      help="Output file path")
    code.add_argument("-r", "--replace", action="store_true",
                      help="Replace existing file")
    code.set_defaults(func=run_create_code, command_parser=code,
                      paths=("bitmap", "output"))

    return parser


def place_paths(args, extras):
    """Fill path positionals that argparse left empty because an option
    came between them, e.g. `createCode a.bmp -r a.h`.

    Returns whatever is still unrecognized.
    """
    extras = list(extras)
    for dest in getattr(args, "paths", ()):
        if getattr(args, dest) is None and extras and not extras[0].startswith("-"):
            setattr(args, dest, extras.pop(0))
    return extras


def _is_blank(path):
    return path is None or not path.strip()


def run_create_bitmaps(args):
    code_folder = resolve_path(args.code, args.code_option)
    output_folder = resolve_path(args.output, args.output_option)

    if _is_blank(code_folder) or _is_blank(output_folder):
        args.command_parser.print_help()
        return

    create_bitmap_files(code_folder, output_folder, replace=args.replace)


def run_create_code(args):
    bitmap_file = resolve_path(args.bitmap, args.bitmap_option)
    output_file = resolve_path(args.output, args.output_option)

    if _is_blank(bitmap_file) or _is_blank(output_file):
        args.command_parser.print_help()
        return

    create_code_file(bitmap_file, output_file, replace=args.replace)


def main(argv=None):
    parser = build_parser()

    try:
        args, extras = parser.parse_known_args(argv)
        extras = place_paths(args, extras)
        if extras:
            parser.error(f"unrecognized arguments: {' '.join(extras)}")
    except CommandLineError as e:
        print(e)
        return EXIT_USAGE

    if args.command is None:
        parser.print_help()
        return 0

    try:
        args.func(args)
    except BitmapUtilityError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_IO

    return 0
