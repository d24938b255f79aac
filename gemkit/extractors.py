"""Base classes for data extraction processes."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Tuple

from .configuration import ExtractionConfiguration
from .errors import GemError


def to_pair(items: Iterable[str]) -> Tuple[str, str]:
    """Turn a two-element sequence into a pair, raising GemError otherwise."""
    values = list(items)
    if len(values) != 2:
        raise GemError(
            "A list must have 2 elements to be converted to a pair "
            f"(instance has {len(values)} elements)"
        )
    return values[0], values[1]


class GenericExtractor(ABC):
    """An extraction process with an input, an output, metadata and a configuration."""

    def __init__(
        self,
        input: Any = None,
        output: Any = None,
        metadata: Any = None,
        configuration: Optional[ExtractionConfiguration] = None,
    ) -> None:
        self.input = input
        self.output = output
        self.metadata = metadata
        self.configuration = configuration

    def extract(self) -> None:
        """Run the extraction."""
        self.perform_extraction()

    @abstractmethod
    def perform_extraction(self) -> None:
        """Carry out the extraction itself."""


def _as_filename(value: Any) -> str:
    return "" if value is None else os.fspath(value) if isinstance(value, os.PathLike) else str(value)


class SingleExtractor(GenericExtractor):
    """An extraction on one file: input, output and metadata are file names."""

    @property
    def input(self) -> str:
        return self._input

    @input.setter
    def input(self, value: Any) -> None:
        self._input = _as_filename(value)

    @property
    def output(self) -> str:
        return self._output

    @output.setter
    def output(self, value: Any) -> None:
        self._output = _as_filename(value)

    @property
    def metadata(self) -> str:
        return self._metadata

    @metadata.setter
    def metadata(self, value: Any) -> None:
        self._metadata = _as_filename(value)


def _as_filenames(value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    return tuple(_as_filename(item) for item in value)


class PairExtractor(GenericExtractor):
    """An extraction on a pair of files: inputs, outputs and metadata are file name pairs.

    Reading a pair that was never set raises GemError.
    """

    def __init__(
        self,
        inputs: Optional[Iterable[Any]] = None,
        outputs: Optional[Iterable[Any]] = None,
        metadata: Optional[Iterable[Any]] = None,
        configuration: Optional[ExtractionConfiguration] = None,
    ) -> None:
        super().__init__(inputs, outputs, metadata, configuration)

    @property
    def input(self) -> Tuple[str, str]:
        return to_pair(self._input)

    @input.setter
    def input(self, value: Optional[Iterable[Any]]) -> None:
        self._input = _as_filenames(value)

    @property
    def output(self) -> Tuple[str, str]:
        return to_pair(self._output)

    @output.setter
    def output(self, value: Optional[Iterable[Any]]) -> None:
        self._output = _as_filenames(value)

    @property
    def metadata(self) -> Tuple[str, str]:
        return to_pair(self._metadata)

    @metadata.setter
    def metadata(self, value: Optional[Iterable[Any]]) -> None:
        self._metadata = _as_filenames(value)