from gemkit.configuration import ExtractionConfiguration
from gemkit.printer import Printer


def test_defaults():
    config = ExtractionConfiguration()
    assert config.verbose is False
    assert (config.pruning_size, config.tolerance, config.zernike_order) == (0, 0, 0)


def test_reset_restores_defaults():
    config = ExtractionConfiguration(verbose=True, pruning_size=5, tolerance=2, zernike_order=8)
    config.reset()
    assert config == ExtractionConfiguration()


def test_print_defaults():
    printer = Printer()
    ExtractionConfiguration().print_to(printer)
    assert printer.content == (
        "ExtractionConfiguration {\n"
        "    verbose : 0\n"
        "    pruningSize : 0\n"
        "    tolerance : 0\n"
        "}\n"
    )


def test_print_reflects_values():
    printer = Printer()
    ExtractionConfiguration(verbose=True, pruning_size=7, tolerance=3).print_to(printer)
    lines = printer.content.splitlines()
    assert lines[1] == "    verbose : 1"
    assert lines[2] == "    pruningSize : 7"
    assert lines[3] == "    tolerance : 3"


def test_print_respects_indent_width():
    printer = Printer(indent_width=2)
    ExtractionConfiguration().print_to(printer)
    assert printer.content.splitlines()[1] == "  verbose : 0"


def test_show_writes_to_stdout(capsys):
    ExtractionConfiguration(tolerance=4).show()
    out = capsys.readouterr().out
    assert out.startswith("ExtractionConfiguration {\n")
    assert "    tolerance : 4\n" in out