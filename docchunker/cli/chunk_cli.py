import argparse
import sys
import logging
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .config_loader import ConfigurationLoader
from .display import ChunkStatistics, ChunkOutputFormatter

from ..config import ChunkingSettings
from ..pipeline import ChunkingPipeline
from ..logger import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "---"


class ChunkCommand:
    """Encapsulates chunk command logic"""

    def __init__(self, args):
        self.args = args
        self.config_loader = ConfigurationLoader()
        self.output_formatter = ChunkOutputFormatter()

    def execute(self) -> int:
        """
        Execute the chunk command

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        try:
            settings, log_level = self._load_settings()

            setup_logging(self.args.log_level or log_level)
            if self.args.config:
                logger.info(f"Loaded chunking config from: {self.args.config}")

            logger.info(f"Reading input file: {self.args.input}")
            content = read_text_file(self.args.input)

            pipeline = ChunkingPipeline(settings)
            chunks = pipeline.chunk_document(
                content,
                strategy=self.args.strategy,
                chunk_size=self.args.chunk_size,
                overlap=self.args.overlap,
            )

            if not chunks:
                logger.warning("No chunks generated from document")
                print("\n✗ No chunks generated. Document may be empty.", file=sys.stderr)
                return 1

            self.output_formatter.print_chunks(chunks, self.args.separator)

            if self.args.stats:
                ChunkStatistics(pipeline.estimator).print_statistics(chunks)

            return 0

        except KeyboardInterrupt:
            logger.info("\nInterrupted by user")
            print("\n✗ Process interrupted by user", file=sys.stderr)
            return 130
        except FileNotFoundError as e:
            logger.error(f"File not found: {e}")
            print(f"\n✗ Error: File not found - {e}", file=sys.stderr)
            return 1
        except Exception as e:
            logger.error(f"Chunking failed: {e}", exc_info=True)
            print(f"\n✗ Error: {e}", file=sys.stderr)
            return 1

    def _load_settings(self):
        """Load settings from the config file if given, else library defaults"""
        if self.args.config:
            settings, log_level = self.config_loader.load_chunking_config(self.args.config)
        else:
            settings, log_level = ChunkingSettings(), 'INFO'

        if self.args.keep_non_ascii:
            settings = replace(settings, strip_non_ascii=False)

        return settings, log_level


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(
        description='Split a document into token-bounded chunks for embedding',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fixed-size token chunks with library defaults
  docchunker --input notes.txt

  # Structure-aware chunking of a markdown file
  docchunker --input report.md --strategy hybrid --chunk-size 300

  # Settings from a YAML file, with statistics
  docchunker --input report.md --config chunking.yaml --stats
        """
    )

    parser.add_argument(
        '--input', '-i',
        required=True,
        help='Path to input document'
    )

    parser.add_argument(
        '--config', '-c',
        help='Path to YAML config file'
    )

    parser.add_argument(
        '--strategy', '-s',
        help='Chunking strategy (token_based, markdown, hybrid)'
    )

    parser.add_argument(
        '--chunk-size',
        type=int,
        help='Maximum tokens per chunk'
    )

    parser.add_argument(
        '--overlap',
        type=int,
        help='Tokens shared between consecutive token chunks'
    )

    parser.add_argument(
        '--keep-non-ascii',
        action='store_true',
        help='Do not replace non-ASCII characters before chunking'
    )

    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Logging level (overrides config file)'
    )

    parser.add_argument(
        '--stats',
        action='store_true',
        help='Print chunk statistics after the chunks'
    )

    parser.add_argument(
        '--separator',
        default=DEFAULT_SEPARATOR,
        help=f'Line printed between chunks (default: {DEFAULT_SEPARATOR})'
    )

    return parser.parse_args(argv)


def read_text_file(file_path: str) -> str:
    """
    Read document content

    Args:
        file_path: Path to document

    Returns:
        File content as string
    """
    path = Path(file_path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    with open(path, 'r', encoding='utf-8') as f:
        content = f.read()

    return content


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = parse_args(argv)
    command = ChunkCommand(args)
    return command.execute()


if __name__ == '__main__':
    sys.exit(main())
