"""
Base classes for input readers.

A reader turns a file on disk into WordprocessingML document text that the
sorter can process. Readers are looked up by file extension through the
ReaderRegistry.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Type


class InputReader(ABC):
    """
    Abstract base class for document input readers.

    Subclasses must implement:
    - get_extensions(): File extensions this reader handles
    - supports_file(file_path): Whether this reader can handle a specific file
    - read(file_path): Return the document XML as text

    Optionally override get_priority() (higher = preferred).
    """

    @classmethod
    @abstractmethod
    def get_extensions(cls) -> List[str]:
        """Supported extensions, including the dot (e.g. ['.docx'])."""
        pass

    @classmethod
    @abstractmethod
    def supports_file(cls, file_path: Path) -> bool:
        pass

    @abstractmethod
    def read(self, file_path: Path) -> str:
        """
        Read the file and return its main document XML as text.

        Raises:
            AcquisitionError: If the file is missing or cannot be read
        """
        pass

    @classmethod
    def get_priority(cls) -> int:
        return 0

    @classmethod
    def get_name(cls) -> str:
        return cls.__name__

    @classmethod
    def get_description(cls) -> str:
        return cls.__doc__ or f"Reader for {cls.get_extensions()}"


class ReaderRegistry:
    """Registry of input readers, keyed by reader name."""

    _readers: Dict[str, Type[InputReader]] = {}

    @classmethod
    def register(cls, reader_class: Type[InputReader]) -> Type[InputReader]:
        """
        Register a reader class. Usable as a decorator:

            @ReaderRegistry.register
            class MyReader(InputReader):
                ...
        """
        cls._readers[reader_class.get_name()] = reader_class
        return reader_class

    @classmethod
    def get_reader_for_file(cls, file_path: Path) -> Optional[InputReader]:
        """
        Return an instance of the highest-priority reader supporting the file,
        or None if no reader supports it.
        """
        file_path = Path(file_path)
        supporting = [r for r in cls._readers.values() if r.supports_file(file_path)]
        if not supporting:
            return None
        supporting.sort(key=lambda r: r.get_priority(), reverse=True)
        return supporting[0]()

    @classmethod
    def get_supported_extensions(cls) -> List[str]:
        extensions = set()
        for reader_cls in cls._readers.values():
            extensions.update(reader_cls.get_extensions())
        return sorted(extensions)

    @classmethod
    def list_readers(cls) -> List[Dict]:
        """Reader info for display."""
        return [
            {
                "name": reader_cls.get_name(),
                "extensions": reader_cls.get_extensions(),
                "priority": reader_cls.get_priority(),
                "description": reader_cls.get_description(),
            }
            for reader_cls in cls._readers.values()
        ]
