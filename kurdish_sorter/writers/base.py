"""
Base classes for output writers.

A writer stores sorted document text in its target format. Writers are
looked up by format name or file extension through the WriterRegistry.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Type


class OutputWriter(ABC):
    """
    Abstract base class for document output writers.

    Subclasses must implement:
    - get_format_name(): Format name (e.g. 'xml', 'docx')
    - get_extension(): File extension for this format
    - write(text, output_path, **options): Store the sorted document
    """

    @classmethod
    @abstractmethod
    def get_format_name(cls) -> str:
        pass

    @classmethod
    @abstractmethod
    def get_extension(cls) -> str:
        pass

    @abstractmethod
    def write(self, text: str, output_path: Path, **options) -> Path:
        """
        Write sorted document text to output_path and return the path.

        Raises:
            ValueError: If required options are missing
            OSError: If file writing fails
        """
        pass

    @classmethod
    def get_name(cls) -> str:
        return cls.__name__

    @classmethod
    def get_description(cls) -> str:
        return cls.__doc__ or f"Writer for {cls.get_format_name()} format"


class WriterRegistry:
    """Registry of output writers, keyed by format name."""

    _writers: Dict[str, Type[OutputWriter]] = {}

    @classmethod
    def register(cls, writer_class: Type[OutputWriter]) -> Type[OutputWriter]:
        """
        Register a writer class. Usable as a decorator:

            @WriterRegistry.register
            class MyWriter(OutputWriter):
                ...
        """
        cls._writers[writer_class.get_format_name()] = writer_class
        return writer_class

    @classmethod
    def get_writer(cls, format_name: str) -> Optional[OutputWriter]:
        writer_cls = cls._writers.get(format_name.lower())
        if writer_cls:
            return writer_cls()
        return None

    @classmethod
    def get_writer_for_extension(cls, extension: str) -> Optional[OutputWriter]:
        """Writer instance for an extension given with or without the dot."""
        if not extension.startswith("."):
            extension = "." + extension
        extension = extension.lower()

        for writer_cls in cls._writers.values():
            if writer_cls.get_extension().lower() == extension:
                return writer_cls()
        return None

    @classmethod
    def get_supported_formats(cls) -> List[str]:
        return sorted(cls._writers.keys())

    @classmethod
    def list_writers(cls) -> List[Dict]:
        """Writer info for display."""
        return [
            {
                "name": writer_cls.get_name(),
                "format": writer_cls.get_format_name(),
                "extension": writer_cls.get_extension(),
                "description": writer_cls.get_description(),
            }
            for writer_cls in cls._writers.values()
        ]
