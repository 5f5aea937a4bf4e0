import argparse
import logging
import sys

from ebmltree.configs import settings
from ebmltree.ebml.document import parse_file
from ebmltree.ebml.errors import EBMLError
from ebmltree.ebml.probe import summarize

logger = logging.getLogger("ebmltree")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ebmltree", description="Dump the element tree of a WebM/Matroska file.")
    parser.add_argument("path", help="File to parse.")
    parser.add_argument("--summary", action="store_true", help="Print a JSON metadata summary instead of the tree.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    try:
        document = parse_file(args.path)
    except EBMLError as e:
        logger.error("Failed to parse %s: %s", args.path, e)
        return 1

    if not args.summary:
        print(document)
        return 0

    try:
        output = summarize(document).model_dump_json(indent=2)
    except EBMLError as e:
        logger.error("Failed to summarize %s: %s", args.path, e)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
