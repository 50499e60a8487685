#!/usr/bin/env python3
"""
Kurdish Sorter - Sort the paragraphs of Word documents in Kurdish alphabet order.

This is the main CLI entry point. Each file goes through three phases:
read (acquire), sort (transform) and write (export). A status label is
printed as each phase finishes.

To add new input formats:
    See kurdish_sorter/readers/base.py for the InputReader interface.

To add new output formats:
    See kurdish_sorter/writers/base.py for the OutputWriter interface.
"""

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import Optional

from kurdish_sorter.core.collation import SortOrder
from kurdish_sorter.core.pipeline import Phase, PipelineDriver, PipelineState, StepStatus
from kurdish_sorter.core.reorder import SorterOptions
from kurdish_sorter.readers import ReaderRegistry
from kurdish_sorter.writers import WriterRegistry
from kurdish_sorter.utils import get_processable_files, sorted_output_path


STATUS_LABELS = {
    Phase.ACQUIRE: {
        StepStatus.LOADING: "UPLOADING...",
        StepStatus.SUCCESS: "UPLOADED",
        StepStatus.ERROR: "UPLOAD FAIL",
    },
    Phase.TRANSFORM: {
        StepStatus.LOADING: "PROCESSING...",
        StepStatus.SUCCESS: "PROCESSED",
        StepStatus.ERROR: "PROCESS FAIL",
    },
    Phase.EXPORT: {
        StepStatus.LOADING: "CREATING FILE...",
        StepStatus.SUCCESS: "FILE CREATED",
        StepStatus.ERROR: "FILE CREATION FAIL",
    },
}


def status_label(phase: Phase, status: StepStatus) -> Optional[str]:
    """Display label for a phase status; None for idle."""
    return STATUS_LABELS[phase].get(status)


def print_finished_status(state: PipelineState, phase: Phase) -> None:
    """Observer printing a label once a phase succeeds or fails."""
    status = state.step(phase).status
    if status in (StepStatus.SUCCESS, StepStatus.ERROR):
        print(status_label(phase, status), end=" ", flush=True)


class DocumentSorter:
    """
    Sorts document files.

    Picks a reader for the input file and a writer for the same format,
    then runs them through a PipelineDriver.
    """

    def __init__(self, options: Optional[SorterOptions] = None, show_status: bool = True):
        self.options = options or SorterOptions()
        self.show_status = show_status

    def process_file(self, input_path: Path, output_path: Path) -> Path:
        """
        Sort one file into output_path.

        Raises:
            ValueError: If no reader or writer handles the file type
            SorterError: If reading, sorting or writing fails
        """
        input_path = Path(input_path)
        reader = ReaderRegistry.get_reader_for_file(input_path)
        if not reader:
            available = ", ".join(ReaderRegistry.get_supported_extensions()) or "none"
            raise ValueError(
                f"No reader found for: {input_path}. "
                f"Supported extensions: {available}"
            )

        writer = WriterRegistry.get_writer_for_extension(input_path.suffix)
        if not writer:
            available = ", ".join(WriterRegistry.get_supported_formats())
            raise ValueError(
                f"No writer found for: {input_path.suffix}. "
                f"Available formats: {available}"
            )

        driver = PipelineDriver(self.options)
        if self.show_status:
            driver.state.subscribe(print_finished_status)

        return driver.run(
            lambda: reader.read(input_path),
            lambda text: writer.write(text, output_path, source_path=input_path),
        )


def list_formats() -> None:
    print("Supported input formats:")
    for info in ReaderRegistry.list_readers():
        print(f"  {info['name']}: {', '.join(info['extensions'])}")
    print("\nSupported output formats:")
    for info in WriterRegistry.list_writers():
        print(f"  {info['format']}: {info['extension']}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Sort the paragraphs of .docx / WordprocessingML files in Kurdish alphabet order.",
    )
    parser.add_argument(
        "--docs",
        default="docs",
        help="Input file, or folder containing files to sort",
    )
    parser.add_argument("--out", default="output", help="Output folder")
    parser.add_argument(
        "--ascending",
        action="store_true",
        help="Put lower-ranked letters and shorter prefixes first (default is descending)",
    )
    parser.add_argument(
        "--list-formats",
        action="store_true",
        help="List supported input and output formats.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.list_formats:
        list_formats()
        return 0

    docs_path = Path(args.docs)
    out_dir = Path(args.out)

    if not docs_path.exists():
        print(f"Error: Input path '{docs_path}' does not exist")
        return 1

    if docs_path.is_file():
        files = [docs_path]
    else:
        files = get_processable_files(docs_path)
    if not files:
        print(f"No supported files found in {docs_path}")
        return 1

    out_dir.mkdir(parents=True, exist_ok=True)
    order = SortOrder.ASCENDING if args.ascending else SortOrder.DESCENDING
    sorter = DocumentSorter(SorterOptions(order=order))

    print(f"📚 Sorting {len(files)} file(s)...\n")

    success_count = 0
    for i, path in enumerate(files, 1):
        out_path = sorted_output_path(path, out_dir)
        print(f"[{i}/{len(files)}] {path.name} → {out_path.name} ...", end=" ")
        try:
            sorter.process_file(path, out_path)
            print("✓ done")
            success_count += 1
        except Exception as e:
            print(f"⚠️ error: {e}")
            if args.verbose:
                traceback.print_exc()

    print(f"\n✅ Successfully sorted {success_count}/{len(files)} file(s).")
    return 0 if success_count == len(files) else 1


if __name__ == "__main__":
    sys.exit(main())
