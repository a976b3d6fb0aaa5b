#!/usr/bin/env python3
"""
Sample script - Write two small worksheets side by side.

Writes two independent .xls documents, interleaving calls between them to
show that writers never interfere with each other.

Usage:
    # Write test1.xls and test2.xls in the current directory
    python scripts/write_sample.py

    # Write to another directory with document order enforced
    python scripts/write_sample.py --output-dir out/ --strict

    # Use settings from a config file (strict mode, etc.)
    python scripts/write_sample.py --config xls_stream.yaml
"""

import argparse
import logging
import sys
from pathlib import Path

# Add xls_stream to path
sys.path.insert(0, str(Path(__file__).parent.parent / "xls_stream"))

from xls_stream import FileSink, XLSWriter, XLSWriterError, load_config


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def write_samples(output_dir: Path, strict: bool = False) -> None:
    """Write test1.xls and test2.xls into output_dir."""
    with FileSink(output_dir / "test1.xls") as s1, FileSink(output_dir / "test2.xls") as s2:
        w1 = XLSWriter(s1, strict=strict)
        w2 = XLSWriter(s2, strict=strict)

        w1.begin()
        w2.begin()

        w1.set_column_width(2, 256 * 100)
        w1.add_number_cell(0, 0, 12345.6)
        w1.add_label_cell(0, 1, b"Testing")

        # The second document is unaffected by the first
        w2.add_number_cell(5, 5, 555.5)

        w1.add_label_cell(0, 2, b"Testing much longer cell content")
        w1.add_number_cell(0, 255, 3.141592)

        w1.finish()
        w2.finish()

        logger.info(f"Wrote {s1.bytes_written} bytes to {s1.path}")
        logger.info(f"Wrote {s2.bytes_written} bytes to {s2.path}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Write sample BIFF2 worksheets")
    parser.add_argument("--output-dir", type=Path, default=Path("."), help="Directory for the .xls files")
    parser.add_argument("--config", type=str, help="Path to xls_stream.yaml")
    parser.add_argument("--strict", action="store_true", help="Enforce begin/finish ordering")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every record")
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = load_config(args.config)
    strict = args.strict or config.strict

    try:
        write_samples(args.output_dir, strict=strict)
    except XLSWriterError as e:
        logger.error(f"Failed to write samples ({e.code.name}): {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
