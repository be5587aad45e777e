# hedgegi

A pure-Python library for the stage data that goes into baking global
illumination and light fields. It reads and writes archives and several
binary resource formats. It also turns mesh lightmap UVs into bake points and
has a small state machine for driving long-running work. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `hedgegi.paths`

- `get_directory_path(path)` returns everything before the last `/` or `\`.
  If the path has no separator, it returns an empty string.
- `get_file_name(path)` returns everything after the last separator.
- `get_file_name_without_extension(path)` returns the file name with its last
  extension removed.
- `str_hash(value)` returns the 64-bit djb2 hash of a string or bytes. It
  stops at the first NUL byte.

### `hedgegi.filestream`

`FileStream(path, mode)` opens a file in binary mode and can be used as a
context manager. All values are little-endian and use `struct` format codes:

- `read(fmt)` returns one value, or a tuple when the format has several fields.
- `read_array(fmt, count)` reads `count` values.
- `write(fmt, *args)` writes values.
- `read_string()` and `write_string(value)` handle a `uint32` length followed
  by UTF-8 bytes, then align to 4 bytes.
- `align(alignment=4)` skips forward to the next multiple of `alignment`.

It also has `tell`, `seek`, `close` and the `is_open` property. A short read
raises `EOFError`. Any use after `close()` raises `ValueError`.

### `hedgegi.archive`

`Archive` holds a list of `ArchiveEntry(name, data)`. You can iterate over
it, index it and take its `len`.

- `find(name)` returns the entry with that name, or `None`.
- `add_or_replace(name, data)` replaces an existing entry in place, or
  appends a new one.

The module-level functions:

- `save_archive(archive)` serialises the archive to bytes. File data is
  aligned to 16 bytes.
- `parse_archive(data)` parses uncompressed archive bytes. It raises
  `ValueError` on malformed data.
- `split_archive_paths(path)` returns the files to read, in order:
  - A path ending in a two-digit extension (`.00`, `.01`, …) names a split
    archive. The function collects consecutive splits until one is missing.
  - If a matching `.arl` file with the `ARL2` signature exists, the split
    count it gives is the limit.
  - Any other path is returned on its own.
- `load_archive(path)` loads a single or split archive and merges every split
  into one `Archive`.

### `hedgegi.stage_files`

- `validate_output_directory(path, create)`:
  - When `create` is true, it first tries to create the directory.
  - It returns whether the directory exists.
  - When the directory is missing, it logs an error.
- `clean_output_directory(path)` deletes `.png`, `.dds`, `.lft`, `.shlf` and
  `.mti` files from the directory. The extension check ignores case. It
  returns the names it deleted, in sorted order, and logs each deletion.

### `hedgegi.rng`

`Random` produces uniform floats in `[0, 1)` through `next()`. An instance
can be seeded. `Random.get()` returns one shared instance per thread.

### `hedgegi.frustum`

`Frustum(matrix)` extracts six normalised `Plane`s from a 4×4
view-projection matrix indexed as `matrix[row][column]`. Each plane has a
`normal`, an `offset` and a `signed_distance(point)` method.

The frustum has three tests:

- `intersects_point(point)` is true only when the point is strictly in front
  of every plane.
- `intersects_sphere(center, radius)` is true when no plane has the centre at
  `-radius` or further behind it.
- `intersects_box(box_min, box_max)` is true as soon as any one plane has the
  box's chosen corner on or in front of it.

### `hedgegi.scene_types`

Dataclasses describing a loaded scene:

- `Material`, with its `MaterialType`, `MaterialParameters` (colour and PBR
  factors with their defaults) and `MaterialTextures`.
- `Model`, which holds a name and a list of meshes.

### `hedgegi.bake_point`

This module provides the `Vertex`, `Triangle`, `Mesh` and `BakePoint`
dataclasses, plus the `BakePointFlags` flag set.

A `BakePoint` has these methods:

- `valid()` reports whether the point has texel coordinates.
- `discard()` marks the point invalid.
- `begin()` resets the accumulated colours and shadow.
- `end(sample_count)` averages the colours over the samples.

The module-level functions:

- `validate_vpos(vpos)` checks that a UV lies in the unit square.
- `create_bake_points(name, meshes, size, basis_count=1)` returns a flat list
  of `size * size` bake points, indexed `y * size + x`:
  - It rasterises each triangle's lightmap UVs into that grid.
  - To dilate edges, it also draws each triangle shifted by small half-texel
    offsets.
  - Texels that no triangle covers stay invalid.
  - When fewer than half of the triangles have usable UVs, it logs a warning.

### `hedgegi.gi_texture`

- `AtlasTexture`, `Atlas` and `AtlasInfo` have a `read(stream)` classmethod
  and a `write(stream)` method that work on binary file-like objects.
- `parse_gi_texture_group_info(data)` parses a big-endian GI texture group
  table into a `GITextureGroupInfo`. The result holds instance names,
  `BoundingSphere` bounds, `GITextureGroup`s and the level-2 group indices.

### `hedgegi.light`

`RawLight.unpack(data, big_endian=True)` and `RawLight.pack(big_endian=True)`
read and write a light. Only a `LightType.POINT` light carries its attribute
and range.

### `hedgegi.shlf`

`parse_sh_light_field(data)` parses little-endian spherical-harmonics light
field data into an `SHLightField` with its `SHLightFieldNode`s. Each node has
a name, probe counts, position, rotation and scale.

### `hedgegi.vertex_format`

This module defines `VertexFormat` and `VertexType`, and describes a mesh's
interleaved vertex bytes with `VertexElement` and `MeshData`. Its functions:

- `swap_vertex(fmt, buffer, offset)` reverses the byte order of one element
  in place. It raises `ValueError` for an unsupported format.
- `swap_vertices(mesh)` reverses the byte order of every element of every
  vertex.
- `remove_vertex_colors(mesh)` sets `FLOAT4` and `UBYTE4_NORM` colours to
  opaque white.
- `strip_to_triangles(faces)` expands a triangle strip with `0xFFFF` restarts
  into index triples. It drops degenerate triangles and alternates the
  winding.

### `hedgegi.state_machine`

`StateMachine(context)` keeps a stack of `State`s:

- `push_state`, `pop_state` and `set_state` change the stack at once.
- The matching `leave()` and `enter()` calls happen on the next `update()`,
  before the top state is updated.
- A state reaches the machine's context through `context`, and can remove
  itself with `drop()`.
- The base `State` tracks `active` and `time_in_state`.
- `IdleState` does nothing more.

### `hedgegi.fx_scene_data` and `hedgegi.needle_fx_scene_data`

Dataclasses and enums for the scene effect parameters of the two engine
generations:

- `FxSceneData` has four `FxParameter` item slots.
- `NeedleFxSceneData` has sixteen `NeedleFxParameter` item slots and a
  `StageConfig`.

## Examples

```python
from hedgegi.archive import Archive, save_archive, parse_archive

archive = Archive()
archive.add_or_replace("stage.lft", b"\x00\x01\x02")
data = save_archive(archive)

restored = parse_archive(data)
print(restored.find("stage.lft").data)
```

```python
from hedgegi.state_machine import State, StateMachine

class Loading(State):
    def update(self, delta_time):
        self.drop()

machine = StateMachine(context=None)
machine.push_state(Loading())
machine.update(0.016)   # enters Loading, which then drops itself
machine.update(0.016)   # Loading leaves; the stack is now empty
```

## What it does not do

The package is a library only.

- It has no command-line tool and no user interface.
- It does not raytrace or bake lighting. `create_bake_points` prepares the
  points, but nothing here samples light for them.
- It does not read or write compressed archives.
- It does not generate lightmap UV layouts.