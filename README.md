# gemkit

gemkit holds building blocks for extracting graphs from document images:

- reading and writing monochrome PNG images, with an optional border (`gemkit.binarypng`);
- 2D Zernike moments of binary shapes (`gemkit.zernike`);
- visibility and intersection relations between rectangular zones, and the mean
  hue of a zone in a color image (`gemkit.zones`);
- core utilities: an indenting text `Printer`, a `Matrix`, file and path helpers,
  per-application local storage, an XML serialization base class, a seedable
  random generator, and base classes for extraction processes.

Errors are raised as `gemkit.errors.GemError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Monochrome PNG images

A binary image is a two-dimensional `uint8` numpy array indexed as
`image[y, x]`, holding `Bw.WHITE` (0) or `Bw.BLACK` (1).

```python
from gemkit import binarypng
from gemkit.binarypng import Bw

image = binarypng.read("shape.png", border_width=2, color=Bw.WHITE)
framed = binarypng.add_border(image, 3, Bw.BLACK)
binarypng.write(image, "copy.png")
```

`read` and `write` accept only file names ending in `.png`; `read` also
rejects missing files and images that are not monochrome.

## Zernike moments

```python
from gemkit.zernike import zernike2d

moments = zernike2d(image, order=8)
```

The moments are computed on the white pixels, with the unit circle centred on
their centroid. `order` must be below 32. If `radius` is not positive, the
smaller side of the image is used instead. Magnitudes are listed by order `n`
and then by repetition `m` with `n - m` even. An image with no white pixel
gives a list of NaN values.

## Zone relations

```python
from gemkit.zones import Rect, visibility, intersection

zones = [Rect(0, 0, 10, 10), Rect(20, 0, 10, 10), Rect(2, 2, 3, 3)]
visible = visibility(zones, Rect(0, 0, 10, 10), 0.5)
inside = intersection(zones, Rect(0, 0, 10, 10), 1.0)
```

Both functions return a set of indices into `zones`. `Rect` supports
`intersects`, `intersected` (`&`) and `united` (`|`).

`HomogeneousZoneExtractor(input=...)` loads an image. Its `color(rect)`
returns, as an `(r, g, b)` tuple, the fully saturated color of the mean hue
inside the zone.

## Core utilities

```python
from gemkit.printer import Printer, capitalize
from gemkit.matrix import Matrix

p = Printer(4)
p.dump("Block {")
p.indent()
p.dump("value : 1")
p.unindent()
p.dump("}")
p.show()

capitalize("hello WORLD")  # "Hello World"

m = Matrix(3, 3, 0.0)
m[0, 1] = 2.5
m.symmetrize()
m.save("matrix.txt")
```

Other modules:

- `gemkit.fileutils`: `load`, `save`, `remove`, extension helpers (`get_extension`,
  `check_extension`, `change_extension`, `remove_extension`), existence and
  validity checks, `slashed`, `contains_images`, `create_path`.
- `gemkit.localstorage`: `LocalStorage`, a directory named after a unique id
  under the user data directory (or a `base_path` you give), with `path`,
  `exists`, `create` and `remove`.
- `gemkit.xmlserializable`: `XmlSerializable`, an abstract base class whose
  subclasses implement `from_xml` and `to_xml`; `load` and `save` handle the files.
- `gemkit.randomgen`: `RandomGenerator`, with `rand_double` and `rand_int`; a
  non-negative seed repeats the same sequence.
- `gemkit.configuration`: `ExtractionConfiguration` (`verbose`, `pruning_size`,
  `tolerance`, `zernike_order`).
- `gemkit.extractors`: `GenericExtractor`, `SingleExtractor`, `PairExtractor`
  and `to_pair`.
- `gemkit.mathutils`: `round_at_precision`, `round_to_nearest_int` and constants.

## What gemkit does not do

gemkit has no graph model and does not build graphs: there is no region
adjacency graph extraction, no vectorization to SVG, and no graph matching.
`HomogeneousZoneExtractor.perform_extraction` only reports progress when the
configuration is verbose. The package provides no command-line tool.