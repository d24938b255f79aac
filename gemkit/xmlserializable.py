"""Base class for objects stored as XML documents on disk."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from typing import Optional, Union

from . import fileutils
from .errors import GemError

PathLike = Union[str, "os.PathLike[str]"]

XML_HEADER = '<?xml version="1.0"?>\n'
INDENT = "    "


class XmlSerializable(ABC):
    """An object that reads itself from and writes itself to an XML file.

    ``filename`` remembers the last file used, so ``load()`` and ``save()``
    may be called without arguments once it is set.  While a document is
    being read or written it is available as ``document``; it is dropped
    again by ``clean()`` when the operation ends.
    """

    def __init__(self, filename: PathLike = "") -> None:
        self.filename = os.fspath(filename)
        self.document: Optional[ET.Element] = None

    def load(self, filename: PathLike = "") -> None:
        """Read the object from an XML file (the remembered one if none given)."""
        if filename:
            self.filename = os.fspath(filename)
        fileutils.check_exists(self.filename)
        try:
            root = ET.parse(self.filename).getroot()
        except OSError as exc:
            raise GemError(
                f'The file "{self.filename}" cannot be opened : {exc.strerror or exc}'
            ) from exc
        except ET.ParseError as exc:
            raise GemError(
                f'The file "{self.filename}" is not a valid XML document : {exc}'
            ) from exc
        self.document = root
        try:
            self.from_xml(root)
        finally:
            self.clean()

    def save(self, filename: PathLike = "") -> None:
        """Write the object to an XML file (the remembered one if none given)."""
        if filename:
            self.filename = os.fspath(filename)
        fileutils.check_valid(self.filename)
        try:
            root = self.to_xml()
            self.document = root
            ET.indent(root, space=INDENT)
            content = XML_HEADER + ET.tostring(root, encoding="unicode") + "\n"
            fileutils.save(content, self.filename)
        finally:
            self.clean()

    def clean(self) -> None:
        """Drop the document held during a load or a save."""
        self.document = None

    @abstractmethod
    def from_xml(self, document: ET.Element) -> None:
        """Fill this object from the root element of a parsed document."""

    @abstractmethod
    def to_xml(self) -> ET.Element:
        """Return the root element of a document describing this object."""