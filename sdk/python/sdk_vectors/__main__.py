"""CLI: python -m sdk_vectors [output_dir]"""

import sys

from . import config
from .driver import generate_all
from .errors import VectorError


def main():
    if len(sys.argv) > 2:
        print("Usage: python -m sdk_vectors [output_dir]", file=sys.stderr)
        sys.exit(1)

    output_dir = sys.argv[1] if len(sys.argv) == 2 else config.OUTPUT_DIR

    try:
        generate_all(output_dir)
    except VectorError as e:
        print(f"error: {e.location()}: {e.message}", file=sys.stderr)
        sys.exit(1)

    print(f"Generated all test vectors in {output_dir}")


if __name__ == "__main__":
    main()
