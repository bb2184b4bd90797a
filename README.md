# cubeworld

A small scene model for 3D worlds, built on numpy. It holds the state of a
world (objects, camera, model/view/projection matrices, lights and materials)
and the commands that update that state from input events, without tying
itself to any window or graphics library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## What is in the package

- `cubeworld.linalg`: `vec3`, `vec4`, `identity`, `normalize`, `translate`,
  `rotate`, `look_at`, `perspective`, `transform_point`, `format_vec`, and the
  tolerant comparisons `vectors_equal` and `vector_less_than` (tolerance
  `EPSILON = 0.0001`). Matrices are 4x4 numpy arrays applied to column
  vectors, so `a @ b` applies `b` first; angles are in radians.
- `cubeworld.camera.Camera`: a first-person camera starting at `(0, 0, 9)`
  looking down negative Z, with `move_forward`, `move_backward`, `move_up`,
  `move_down`, `strafe_left`, `strafe_right`, `pitch`, `yaw`, `look`,
  `view` and `set_location`.
- `cubeworld.matrix_stack.MatrixStack`: separate model, view and projection
  stacks, each starting with an identity matrix (`push_*`, `pop_*`, `top_*`).
  The `top_*` methods return the stored array, so assigning into it with
  `[:]` changes the stack.
- `cubeworld.orbiter.Orbiter` and `cubeworld.rotator.Rotator`: transforms that
  accumulate rotation over elapsed time.
- `cubeworld.lights`: `Light`, `DistanceLight`, `PositionalLight` dataclasses.
- `cubeworld.materials`: the `Material` dataclass and the presets
  `BlackPlastic`, `Brass`, `Chrome`, `Gold`, `GrayPlastic`, `Pearl`,
  `WhitePlastic`.
- `cubeworld.world_object`: `Triangle` (face normal and tangent) and the
  abstract `WorldObject`, whose `compute_vertex_normals` gives each vertex the
  normalised sum of the normals of every face touching it, and whose
  `set_colors` pads or trims a colour list to a given length.
- `cubeworld.world.World`: an observable collection of uniquely named
  objects, indexable by position or name, with a `camera`, a `matrix_stack`
  and a `draw` that draws every object in insertion order.
- `cubeworld.commands`: `Mover` (keys a, s, d, w, q, e move the camera),
  `Looker` (first mouse button toggles mouse look), `Renderer` (draws the
  world on every pulse) and `ViewManager` (keeps a 60 degree perspective
  projection in step with the window size), with the key and action
  constants `KEY_A` ... `KEY_W`, `RELEASE`, `PRESS`, `REPEAT`,
  `MOUSE_BUTTON_1`.
- Utilities: `cubeworld.nibble_array.NibbleArray` (4 bits per element),
  `cubeworld.mathutil` (`factorial`, `pick`, `choose`),
  `cubeworld.timer` (`Timer`, `AutoTimer`),
  `cubeworld.random_range.RandomRange`, `cubeworld.thread_pool.ThreadPool`,
  `cubeworld.observable` (`Observable`, `Observer`),
  `cubeworld.inverter.Inverter`, and the exceptions `GLError` and
  `RubiksCubeError` in `cubeworld.errors`.

## Examples

```python
from cubeworld.camera import Camera
from cubeworld.matrix_stack import MatrixStack

camera = Camera()
camera.move_forward(0.1)
camera.yaw(0.016, 10)

stack = MatrixStack()
stack.push_view()
stack.top_view()[:] = camera.view()
stack.pop_view()
```

A world object supplies its own vertices and drawing. The program object it
is given only needs a `generate_vertex_array_object()` method:

```python
from cubeworld.linalg import vec3
from cubeworld.world import World
from cubeworld.world_object import WorldObject


class Program:
    def generate_vertex_array_object(self):
        return 1


class Flat(WorldObject):
    def draw(self, elapsed):
        pass


world = World(Program())
tri = world.add_world_object(Flat("tri", world.program, world.matrix_stack))
tri.vertices = [vec3(0, 1, 0), vec3(1, 0, 0), vec3(-1, 0, 0)]
tri.compute_vertex_normals()
assert world["tri"] is tri and len(world) == 1
```

The commands take any window object that has `width` and `height`
attributes and the methods `add_keypress_listener`, `add_pulse_listener`,
`add_mouse_button_listener`, `add_framebuffer_resize_listener`,
`cursor_pos`, `set_cursor_pos`, `hide_cursor` and `show_cursor`. Each
command registers its handlers with the window when it is created.

```python
from cubeworld.nibble_array import NibbleArray

arr = NibbleArray(10, 0)
arr[3] = 7
assert arr[3] == 7
assert arr.inflate()[3] == 7
```

```python
from cubeworld.thread_pool import ThreadPool

results = []
with ThreadPool(4) as pool:
    for i in range(10):
        pool.add_job(lambda i=i: results.append(i * i))
# Leaving the block waits until every queued job has finished.
```

```python
from cubeworld.timer import AutoTimer

with AutoTimer():
    sum(range(1_000_000))
# prints "Elapsed time: ...s"
```

## What the package does not do

- It opens no window and makes no graphics calls. You provide the window
  object the commands listen to, and the shader program that world objects
  are given.
- It ships no ready-made meshes such as cubes, spheres or tori: a
  `WorldObject` subclass fills in `vertices` (and `colors`) itself and
  implements `draw`.
- It has no command-line program.