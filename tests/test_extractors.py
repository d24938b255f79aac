from pathlib import Path

import pytest

from gemkit.configuration import ExtractionConfiguration
from gemkit.errors import GemError
from gemkit.extractors import GenericExtractor, PairExtractor, SingleExtractor, to_pair


class RecordingExtractor(GenericExtractor):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.runs = []

    def perform_extraction(self):
        self.runs.append((self.input, self.output, self.metadata))


class RecordingSingle(SingleExtractor):
    def perform_extraction(self):
        self.seen = self.input


class RecordingPair(PairExtractor):
    def perform_extraction(self):
        self.seen = self.input


def test_generic_extract_runs_implementation():
    config = ExtractionConfiguration()
    extractor = RecordingExtractor("in", "out", "meta", config)
    extractor.extract()
    assert extractor.runs == [("in", "out", "meta")]
    assert extractor.configuration is config


def test_generic_is_abstract():
    with pytest.raises(TypeError):
        GenericExtractor()


def test_single_defaults_are_empty_strings():
    extractor = RecordingSingle()
    GenericExtractor.extract(extractor)
    assert extractor.seen == ""
    assert (extractor.input, extractor.output, extractor.metadata) == ("", "", "")
    assert extractor.configuration is None


def test_single_converts_paths_to_strings():
    extractor = RecordingSingle(Path("a") / "b.png", "g.gxl", "m.xml")
    GenericExtractor.extract(extractor)
    assert extractor.seen == str(Path("a") / "b.png")
    assert extractor.input == str(Path("a") / "b.png")


def test_pair_round_trip():
    extractor = RecordingPair(("q.png", "t.png"), ("q.gxl", "t.gxl"), ("q.xml", "t.xml"))
    GenericExtractor.extract(extractor)
    assert extractor.seen == ("q.png", "t.png")
    assert extractor.input == ("q.png", "t.png")
    assert extractor.output == ("q.gxl", "t.gxl")
    assert extractor.metadata == ("q.xml", "t.xml")


def test_pair_setter_replaces_value():
    extractor = RecordingPair(("a", "b"), ("c", "d"), ("e", "f"))
    extractor.output = ["x", "y"]
    GenericExtractor.extract(extractor)
    assert extractor.seen == ("a", "b")
    assert extractor.output == ("x", "y")


def test_pair_unset_raises():
    extractor = RecordingPair()
    with pytest.raises(GemError, match="instance has 0 elements"):
        GenericExtractor.extract(extractor)


def test_pair_wrong_size_raises():
    extractor = RecordingPair(("a", "b", "c"), ("c", "d"), ("e", "f"))
    with pytest.raises(GemError, match="instance has 3 elements"):
        GenericExtractor.extract(extractor)


def test_to_pair():
    assert to_pair(["first", "second"]) == ("first", "second")
    with pytest.raises(GemError):
        to_pair(["only"])