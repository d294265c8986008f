# plutoengine

A small, dependency-free toolkit for the mathematics behind real-time 3D
graphics.

## What is in it

- `plutoengine.scalar` has the scalar helpers `clamp_scalar`, `step_scalar`,
  `smoothstep_scalar`, `almost_equal`, `radians` and `degrees`.
- `plutoengine.vector` has the 2- and 3-component vectors `Vec2` and `Vec3`.
  `Vec4` lives in `plutoengine.vec4`. Vectors support:
  - arithmetic with `+`, `-`, scalar `*` and `/`, and the in-place forms of
    these;
  - indexing, and the named components `x`, `y`, `z`, `w`;
  - `dot`, `cwise_mul`, `length`, `length_squared`, `magnitude`, `norm`,
    `normalize`, `distance` and `distance_squared`;
  - `cross`, on `Vec2` (a scalar) and on `Vec3` (a vector);
  - the component-wise functions `clamp`, `lerp`, `angle_between`, `step`,
    `smoothstep`, `faceforward`, `reflect`, `refract`, `minimum`, `maximum`
    and `absolute`.
- The square matrices are stored column by column: `m[j]` is column `j`.
  `Mat2` lives in `plutoengine.matrix`, `Mat3` in `plutoengine.mat3` and
  `Mat4` in `plutoengine.mat4`. Matrices support:
  - matrix, vector and scalar products;
  - `identity`, `from_rows`, `col`, `row` and `transpose`;
  - `minor`, `cofactor`, `adjugate`, `determinant` and `inverse`;
  - `gram_schmidt`, and `values`, which gives the entries in column-major
    order.
- `plutoengine.transform` has the 2D transforms `scale2d`, `translate2d`,
  `rotate2d` and `trs2d`, which give `Mat3`. It has the 3D transforms
  `scale3d`, `translate3d`, `rotate3d`, `rotate_x`, `rotate_y` and `rotate_z`,
  which give `Mat4`. Each takes an optional `mat`. When given, the result is
  `mat * transform`.
- `plutoengine.projection` has `project`, which projects a vector onto a
  vector or onto a matrix's column space. It also has `ortho`, `perspective`
  (with the y axis flipped) and `look_at`.
- `plutoengine.camera` has a fly-through `Camera` dataclass and the
  `CameraMovement` enum. The camera has `process_keyboard`,
  `process_mouse_movement`, `process_mouse_scroll` and `view_matrix`.
- `plutoengine.primitives` has `square()`, `cube()` and `circle(steps=30)`.
  Each returns a `Primitive` with interleaved vertices (position, normal,
  uv: eight floats each) and triangle indices.

## Installation

```
pip install plutoengine
```

## Example

```python
from plutoengine.vector import Vec3
from plutoengine.mat4 import Mat4
from plutoengine.transform import translate3d, rotate3d, scale3d
from plutoengine.projection import perspective
from plutoengine.scalar import radians
from plutoengine.camera import Camera, CameraMovement

model = translate3d(Vec3(1.0, 0.0, 0.0), Mat4.identity())
model = rotate3d(radians(45.0), Vec3(0.0, 1.0, 0.0), model)
model = scale3d(Vec3(0.5, 0.5, 0.5), model)

camera = Camera(Vec3(0.0, 0.0, -3.0))
camera.process_keyboard(CameraMovement.FORWARD, 0.016)
camera.process_mouse_movement(10.0, -5.0)

projection = perspective(radians(camera.zoom), 800 / 600, 0.1, 100.0)
mvp = projection * camera.view_matrix() * model
print(mvp.values())
```

## Errors

Vectors and matrices compare equal within a relative tolerance. Several
operations raise errors:

- Dividing a vector or matrix by zero raises `ZeroDivisionError`. So does
  projecting onto a zero vector.
- Inverting a singular matrix raises `ValueError`.
- `angle_between` raises `ValueError` for a zero-length vector.
- `lerp` raises `ValueError` for weights outside `[0, 1]`.
- An index out of range raises `IndexError`.
- Mixing vectors or matrices of different sizes raises `TypeError`.

## What it does not do

The package does only the mathematics and the mesh data. It does not:

- open windows;
- talk to a graphics API;
- compile shaders;
- load textures;
- read input devices.

The camera takes offsets that you pass in yourself. There is no sphere
primitive.