# mistengine

A small engine core written around numpy: transforms, cameras, scenes of
entities and components, impulse-based rigid-body physics with sphere, box
and plane colliders, a layer stack driven by an update/render frame loop,
and an editor layer that sets up a test scene.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the editor

```
mist-editor --frames 100
```

This opens an `Application` named "Editor", pushes an `EditorLayer` whose
`SceneWindow` loads an empty scene with two box bodies and a perspective
camera, and runs the frame loop: each frame the layers update, the physics
steps the active scene, and the layers render.

Options:

- `--frames N` — quit after `N` frames. Without it the loop runs until
  interrupted with Ctrl-C.
- `--shader PATH` — load a shader file into the application's shader
  library; it is named after the file's stem.

## Using the library

```python
from mistengine.scene import SceneManager
from mistengine.transform import Transform
from mistengine.colliders import Collider, BoxCollider, Rigidbody
from mistengine.physics import Physics
from mistengine.mathutils import vec3

manager = SceneManager()
manager.load_empty_scene()

a = manager.create_entity()
manager.add_component(a, Transform(position=vec3(1, 0, 0)))
manager.add_component(a, Rigidbody(mass=1.0, bounce=0.5, velocity=vec3(-1, 0, 0)))
manager.add_component(a, Collider(BoxCollider(vec3(1, 1, 1))))

b = manager.create_entity()
manager.add_component(b, Transform(position=vec3(-1, 0, 0)))
manager.add_component(b, Rigidbody(mass=1.0, bounce=0.5, velocity=vec3(1, 0, 0)))
manager.add_component(b, Collider(BoxCollider(vec3(1, 1, 1))))

Physics().simulate(manager.active_scene, 1 / 60)
```

`Physics.simulate(scene, delta)` moves every body with a `Transform` and a
`Rigidbody` by its velocity, tests every pair that also has a `Collider`
with `detect_collision`, and resolves each hit with an impulse and a
positional correction of 20% of the separating vector, shared by mass.
The individual tests (`sphere_intersect`, `sphere_box_intersect`,
`sphere_plane_intersect`, `box_intersect`, `box_plane_intersect`,
`plane_intersect`) return an `IntersectData` with `is_intersecting` and
`minimum_translation_vector`.

### Other modules

- `mistengine.mathutils` — vectors, quaternions as `(w, x, y, z)`, and
  4x4 matrices: `quat_from_euler`, `quat_rotate`, `translate`, `scale`,
  `perspective`, `ortho`, `look_at` and more.
- `mistengine.transform.Transform` — position, rotation and scale, with
  direction vectors (`forward()`, `up()`, ...) and
  `local_to_world_matrix()` / `world_to_local_matrix()`.
- `mistengine.camera.Camera` — `set_perspective` (field of view in
  degrees) and `set_orthographic`, `view_matrix()` and
  `view_projection_matrix()`. With `flip_y` (on by default) the projection's
  vertical scale is negated for Y-down clip space.
- `mistengine.scene` — `Scene` (`create`, `destroy`, `add_component`,
  `get`, `try_get`, `view`) and `SceneManager`, which forwards to the
  active scene; `update_scene_camera()` returns its first camera.
- `mistengine.layers` — `Layer` with `on_attach`, `on_detach`,
  `on_update`, `on_render`, `on_event`, and the ordered `LayerStack`.
- `mistengine.application` — `Application` owns the layer stack, scene
  manager, shader library and physics. `run_frame(events)` processes one
  frame with a list of `Event` objects (`EventType.QUIT`,
  `EventType.WINDOW_RESIZED`); `run(event_source)` loops until `quit()`.
  Only one application may be open at a time; `close()` (or using it as a
  context manager) releases it.
- `mistengine.shader` — `Shader` read from a file and the `ShaderLibrary`
  that stores shaders by unique name.
- `mistengine.framebuffer` — `FramebufferTextureFormat`,
  `FramebufferProperties` and `format_to_string`.
- `mistengine.buffer` — `BufferLayout` of `BufferElement`s with computed
  offsets and stride.
- `mistengine.dialogs` — `open_file` and `save_file` through `zenity` or
  `kdialog` when one is installed; otherwise they log a warning and return
  an empty string.
- `mistengine.log` — `init()` and `get_logger()` for the shared `mist`
  logger.

## What it does not do

- There is no window and no GPU rendering. The application keeps a
  window size and a viewport as plain values; `Shader` only holds the
  file's text, and binding it just marks it bound.
- No events come from the operating system. Events are the `Event`
  objects passed to `run_frame` or returned by the `event_source` given to
  `run`.
- Scenes cannot be saved or loaded from files: `SceneManager.load_scene()`
  only logs that it is not implemented.