"""Command-line interface for langseg."""

import argparse
import json
import sys

from langseg import __version__
from langseg.core.config import get_settings
from langseg.core.exceptions import DecodingError, InputTooShortError, ValidationError
from langseg.core.logging_config import configure_logging
from langseg.services.preprocessing.decoder import TextDecoder
from langseg.services.reporting.generator import ReportGenerator
from langseg.services.reporting.histogram import HistogramBuilder
from langseg.services.segmentation.windows import SegmentationResult, WindowSegmenter


def _print_result(
    name: str,
    result: SegmentationResult,
    args: argparse.Namespace,
    segmenter: WindowSegmenter,
) -> None:
    report = result.report

    if args.json:
        payload = report.model_dump(mode="json")
        if not args.segments:
            payload["segments"] = []
        print(json.dumps({"file": name, "report": payload}, ensure_ascii=False))
        return

    generator = ReportGenerator()
    print(f"Analyzing {name} (total characters: {report.length})")
    print(
        f"Window size: {segmenter.window_size} | Overlap: {segmenter.overlap_size} "
        f"| Step: {segmenter.step_size}"
    )

    if args.segments:
        for line in generator.summarize_segments(report):
            print(line)

    print()
    for line in generator.generate(report):
        print(line)

    if args.histogram:
        builder = HistogramBuilder()
        for histogram in (
            builder.letters(result.document, args.top),
            builder.characters(result.document),
        ):
            print()
            for line in builder.render(histogram):
                print(line)


def main(argv: list[str] | None = None) -> int:
    """Run the ``langseg`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    :returns: Process exit status.
    """
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Detect English and French passages in text files."
    )
    parser.add_argument("files", nargs="*", help="Files to analyze (stdin if omitted)")
    parser.add_argument(
        "--segments", action="store_true", help="Print the verdict of every window"
    )
    parser.add_argument(
        "--histogram", action="store_true", help="Print letter and character histograms"
    )
    parser.add_argument(
        "--top", type=int, default=5, help="Letters shown in the letter histogram"
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument(
        "-e", "--encoding", default=settings.default_encoding, help="Input encoding"
    )
    parser.add_argument(
        "--log-level", default=settings.log_level, help="Logging level (default: %(default)s)"
    )
    parser.add_argument(
        "--version", action="version", version=f"langseg {__version__}"
    )

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        decoder = TextDecoder(encoding=args.encoding)
        segmenter = WindowSegmenter.from_settings()
    except (DecodingError, ValidationError) as e:
        print(f"langseg: {e.message}", file=sys.stderr)
        return 1

    status = 0
    sources = args.files or ["-"]

    for source in sources:
        name = "stdin" if source == "-" else source
        try:
            if source == "-":
                text = decoder.decode(sys.stdin.buffer.read())
            else:
                text = decoder.read_file(source)
            result = segmenter.run(text)
        except (DecodingError, InputTooShortError) as e:
            print(f"langseg: {name}: {e.message}", file=sys.stderr)
            status = 1
            continue

        _print_result(name, result, args, segmenter)

    return status


if __name__ == "__main__":
    sys.exit(main())
