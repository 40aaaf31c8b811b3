"""config_loading.py"""
import sys

from typedargs import ArgumentError, loader

parser = loader("typedargs.yaml")

if __name__ == "__main__":
    try:
        print(parser.parse_args())
    except ArgumentError as error:
        parser.render_help()
        print(f"error: {error}", file=sys.stderr)
        sys.exit(2)
