"""Parameters of graph extraction."""

from __future__ import annotations

from dataclasses import dataclass

from .printer import Printable, Printer


@dataclass
class ExtractionConfiguration(Printable):
    """Settings shared by the extractors."""

    verbose: bool = False
    pruning_size: int = 0
    tolerance: int = 0
    zernike_order: int = 0

    def reset(self) -> None:
        """Restore every parameter to its default value."""
        self.verbose = False
        self.pruning_size = 0
        self.tolerance = 0
        self.zernike_order = 0

    def print_to(self, printer: Printer) -> None:
        printer.dump("ExtractionConfiguration {")
        printer.indent()
        printer.dump(f"verbose : {int(self.verbose)}")
        printer.dump(f"pruningSize : {self.pruning_size}")
        printer.dump(f"tolerance : {self.tolerance}")
        printer.unindent()
        printer.dump("}")