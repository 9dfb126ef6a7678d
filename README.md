# jungle_engine

Core runtime pieces of a small game engine, in plain Python with no
third-party dependencies.

## Modules

- `mathutil` – scalar helpers: `clamp`, `lerp`, `radians_to_degrees`,
  `degrees_to_radians`, `ceil_to_int`, `sin_cos`, `unwind_degrees`, and the
  constants `PI`, `SMALL_NUMBER`, `KINDA_SMALL_NUMBER`.
- `vector` – immutable `Vector2D`, `Vector` and `Vector4`. `Vector` has
  `dot`, `cross`, `magnitude`, `normalize`, `distance` and the constants
  `Vector.ZERO`, `Vector.ONE`, `Vector.FORWARD`, `Vector.RIGHT`, `Vector.UP`.
- `matrix` – immutable row-major 4×4 `Matrix` for row vectors (`v * M`), with
  `+`, `-`, `*` (matrix or scalar), `/` (scalar), `transpose`, `determinant`,
  `inverse` (returns the identity for a nearly singular matrix),
  `transform_vector`, `transform_vector4` and `transform_position` (which
  divides by `w`). Builders: `identity`, `create_rotation(roll, pitch, yaw)`
  in degrees, `create_scale`, `create_translation`.
- `quat` – `Quat` with multiplication, `rotate_vector`, `normalize`,
  `is_normalized`, `conjugate` and `to_matrix`; builders `from_axis_angle`
  (radians) and `create_rotation` (degrees).
- `transforms` – `create_model_matrix` (Euler angles or a `Quat`),
  `create_view_matrix` (left-handed look-at), `create_projection_matrix`,
  `create_ortho_projection_matrix`, `create_rotation_matrix`,
  `euler_to_quaternion`, `quaternion_to_euler`, `rotate_vector`,
  `convert_v3_to_v4`, `rad_to_deg`, `deg_to_rad`.
- `frustum` – `Plane` and `Frustum`. `Frustum.from_view_projection` extracts
  the six planes from a view-projection matrix; `intersects_box` and
  `contains_point` test visibility.
- `arrays` – `Array`, a `list` subclass with `add` (returns the index),
  `add_unique`, `init`, `discard`, `remove_single`, `remove_at`, `remove_if`,
  `find` (returns -1 when absent), `set_num` and `is_valid_index`.
- `maps` – `Map` (a `dict` with `add`, `emplace`, `find`, `find_or_add` and an
  optional `default_factory`), `Set` (an insertion-ordered set whose `add`
  returns the element's position, with `remove` and `to_array`), and `Pair`
  with `make_pair`.
- `names` – `Name`, interned through a `NamePool` by a 32-bit djb2 hash
  (`hash_string`, `hash_string_lower`). Names compare equal regardless of
  ASCII case; an empty `Name()` prints as `None`.
- `memory` – `AllocationStats`, thread-safe byte and count totals per
  `AllocationType`, and `size_type_for_bits` for 8/16/32/64-bit index types.

## Installation

```
pip install .
```

## Examples

```python
from jungle_engine.vector import Vector
from jungle_engine.matrix import create_translation, create_scale

model = create_scale(2, 2, 2) * create_translation(Vector(1, 0, 0))
print(model.transform_position(Vector(1, 1, 1)))   # Vector(x=3.0, y=2.0, z=2.0)
```

```python
import math
from jungle_engine.vector import Vector
from jungle_engine.transforms import create_view_matrix, create_projection_matrix
from jungle_engine.frustum import Frustum

view = create_view_matrix(Vector(0, 0, 0), Vector(1, 0, 0), Vector(0, 0, 1))
projection = create_projection_matrix(math.pi / 2, 1.0, 0.1, 100.0)
frustum = Frustum.from_view_projection(view * projection)
print(frustum.contains_point(Vector(5, 0, 0)))    # True
print(frustum.contains_point(Vector(-5, 0, 0)))   # False
```

```python
from jungle_engine.names import Name

print(Name("Actor") == Name("ACTOR"))   # True
print(str(Name("Actor")), str(Name()))  # Actor None
```

```python
from jungle_engine.maps import Map

groups = Map(default_factory=list)
groups.find_or_add("enemies").append("orc")
print(groups.find("enemies"))           # ['orc']
```

## What this package does not do

It has no rendering, windowing or input handling, no event or callback
system, no object model or runtime class registry, and no string-search
helpers beyond what Python's own `str` offers. It provides the math,
culling, container, naming and allocation-counting pieces only.

## Running the tests

```
pip install .[test]
pytest
```