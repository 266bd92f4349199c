#!/usr/bin/env python3
"""
Extract Objects

Build step that turns the strategy board object tables into assets JSON.

Pipeline:
1. Load configuration (optional INI file)
2. Load the sprite parameter table and its enumeration
3. Project each parameter entry into an {id, name, ...fields} descriptor
4. Serialize all descriptors to one compact JSON array
5. Write the array to stdout (or --output)

Logging goes to stderr, so stdout carries nothing but the JSON document.

Usage:
    python -m asset_compiler.extract_objects > assets.json
    extract-objects --config extract.ini --output ../assets.json
"""

import sys
import argparse
import time
from pathlib import Path
from typing import List, Optional

from asset_compiler.assets import load_tables
from asset_compiler.config import ExtractConfig
from asset_compiler.extraction import ExtractionError, build_enumeration_table, project
from asset_compiler.extraction.projector import SpriteDescriptor
from asset_compiler.serialization import serialize, write_output
from asset_compiler.utils import log, logError, init_logging, close_logging, print_summary


def extract_objects(config: ExtractConfig) -> List[SpriteDescriptor]:
    """
    Load the configured tables and project them into descriptors.

    Raises:
        ExtractionError: The tables cannot be loaded or joined
    """
    parameters, enumeration_source = load_tables(config.source)
    enumeration = build_enumeration_table(enumeration_source)
    log(f"  Parameter entries: {len(parameters)}")
    log(f"  Enumeration entries: {len(enumeration)}")

    return project(parameters, enumeration, strict_ids=config.strict_ids)


def run(config: ExtractConfig) -> int:
    """
    Run the full extraction and write the JSON document.

    Returns:
        Number of descriptors written
    """
    log("=" * 70)
    log("OBJECT EXTRACTION")
    log("=" * 70)

    start_time = time.time()

    descriptors = extract_objects(config)
    text = serialize(descriptors)
    write_output(text, config.output_path)

    elapsed = time.time() - start_time
    destination = config.output_path if config.output_path else "stdout"
    log(f"Wrote {len(descriptors)} descriptors to {destination} in {elapsed:.2f} seconds")

    return len(descriptors)


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        description='Extract strategy board object descriptors as JSON',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example:
    python -m asset_compiler.extract_objects > assets.json

    # From a JSON table file, written straight to disk:
    python -m asset_compiler.extract_objects --config extract.ini --output ../assets.json

    # Fail on non-numeric identifiers instead of emitting a null id:
    python -m asset_compiler.extract_objects --strict-ids
        """
    )

    parser.add_argument('--config', default=None,
                        help='Path to extraction INI file')
    parser.add_argument('--output', default=None,
                        help='Write JSON to this file instead of stdout')
    parser.add_argument('--log', default=None,
                        help='Also write the extraction log to this file')
    parser.add_argument('--strict-ids', action='store_true',
                        help='Fail on identifiers that are not base-10 numbers')
    args = parser.parse_args(argv)

    init_logging(Path(args.log) if args.log else None)

    try:
        config = ExtractConfig.load(Path(args.config) if args.config else None)

        if args.output:
            config.output_path = Path(args.output)
        if args.strict_ids:
            config.strict_ids = True
        if config.log_path and not args.log:
            # Config only known now; reopen with the configured log file
            close_logging()
            init_logging(config.log_path)

        run(config)
        print_summary()

    except ExtractionError as e:
        logError(f"{e}")
        print_summary()
        sys.exit(1)

    except Exception as e:
        logError(f"{e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)

    finally:
        close_logging()


if __name__ == '__main__':
    main()
