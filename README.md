# swaypix

This package provides the parts of a keyboard-driven image viewer for the
Sway window manager. It includes image frames and their transforms, a
navigable list of image files, key bindings, the text blocks of an info
overlay, and a client for Sway's IPC socket.

It needs Python 3.10 or later and has no third-party dependencies.

## Modules

### `swaypix.image`

`Image` holds the following:

- `file_path` and `file_name`;
- `file_size`;
- the `format` description;
- a list of `ImageFrame` objects in `frames`;
- an `alpha` flag;
- meta info in `info`, a list of `(key, value)` pairs that `add_meta`
  appends to. `add_meta` skips empty values.

An `ImageFrame` has `width`, `height`, `duration` in milliseconds, and
`data`. The `data` is a flat list of ARGB pixels stored row by row.

Each loading function takes a *decoder*. A decoder is a callable
`decoder(image, data)` that fills in the new image, usually through
`create_frame(width, height)` or `create_frames(count)`. The loading
functions are:

- `Image.from_bytes(path, data, decoder)`
- `Image.from_file(path, decoder)`
- `Image.from_stdin(decoder, stream=None)`. It reads standard input when no
  stream is given. The path of an image loaded this way is `{STDIN}`.

A decoder raises `UnsupportedFormatError` for data it does not handle.
Read errors raise `ImageError`, and `UnsupportedFormatError` is also an
`ImageError`.

The following methods work on every frame of an image, and `ImageFrame`
has the same methods for a single frame:

- `flip_vertical()`
- `flip_horizontal()`
- `rotate(angle)`. It rotates clockwise by 90, 180 or 270 degrees. Other
  angles are ignored.

### `swaypix.imagelist`

`ImageList(loader)` keeps an ordered list of files. The *loader* turns a
path into an `Image` and raises `ImageError` for files that are not images.
A typical loader is `lambda p: Image.from_file(p, my_decoder)`.

`scan(files)` fills the list and loads the first image. It returns `False`
if no image could be loaded. What `scan` adds depends on `files`:

- **No paths:** every non-empty file in the current directory.
- **A directory:** the files in that directory.
- **The single path `-`:** one entry named `*stdin*`. The loader is called
  with that name.
- **A file:** that file alone. If `all_files` is set, it adds every file in
  that file's directory instead and starts at the given file.

The list is then ordered by `order`, which is a `ListOrder` value:

- `ALPHA` sorts it in locale order.
- `RANDOM` shuffles it.
- `NONE` leaves it as found.

Moving through the list:

- `jump(ListJump.…)` moves to the first, last, next or previous file, or to
  the next or previous directory. It returns `False` when there is nowhere
  to go.
- When `loop` is set, moving past one end continues at the other.
- Entries that fail to load are skipped and marked as removed. `len()` still
  counts them.
- The next image is preloaded in a background thread.

Other calls:

- `current()` returns an `ImageEntry(index, image)`.
- `reset()` drops cached images and reloads the current one. If that fails
  it falls back to the next or previous image.
- `close()` stops preloading and empties the list.

### `swaypix.keybind`

`KeyBindings()` starts with the default bindings. Some of them:

- `space`: next file
- `Home` and `End`: first and last file
- `d` and `D`: next and previous directory
- `plus` and `minus`: zoom by `+10` and `-10`
- `bracketleft` and `bracketright`: rotate left and right
- `m` and `M`: flip vertically and horizontally
- `i`: info
- `e`: exec, with the parameters `echo "Image: %"`
- `Escape` and `q`: exit

Working with bindings:

- `set(key, action, params=None)` binds a key to an `Action`. The key is a
  key-symbol name such as `"space"` or `"F1"`, or a numeric code.
- Binding a key to `Action.NONE` clears it.
- `get(key)` returns a `KeyBinding` or `None`.
- Iterating over a `KeyBindings` yields every binding.

A `KeyBinding` has `key`, `action`, `params` and `help`. The `help` text is
the key name, the action name and any parameters, for example
`plus zoom +10`.

### `swaypix.info`

`Info()` builds the text blocks for the four corners of a window, which are
the `InfoPosition` values. The available fields are the `InfoField` values:

- name, path, file size and format;
- image size;
- EXIF lines taken from the image's meta info;
- frame, list index and scale;
- status.

Using it:

- `update(image, frame_index, list_index, list_size, scale)` refreshes the
  values.
- `set_status(text)` sets the status line, and `set_status(None)` clears it.
- `height(position)` gives the number of lines of a block.
- `lines(position)` returns its `InfoLine(key, value)` items.

These fields are left out of a block when they carry nothing:

- the frame, for a single-frame image;
- the index, for a single-file list;
- an empty status.

The display mode is an `InfoMode`: `FULL`, `BRIEF` or `OFF`.
`set_mode(name)` selects a mode by name. Given no name, or a name it does
not know, it moves to the next mode.

### `swaypix.sway`

`SwayIpc.connect(path=None)` connects to the given socket. Without a path it
uses the socket named by `SWAYSOCK`. The connection can be used as a
context manager.

- `current()` returns the focused window's `Rect` and whether it is full
  screen.
- `add_rules(app, x, y, absolute)` makes windows with that app id floating
  and moves them to `x, y`.
- `message(msg_type, payload=None)` sends a raw `IpcMessage` request and
  returns the decoded JSON reply.
- `command(app, command)` runs a `for_window` command.

Failures raise `SwayError`. `current_window`, `current_workspace` and
`read_rect` search the JSON replies.

### `swaypix.strutil` and `swaypix.pixels`

`strutil` has helpers for configuration values:

- `split` trims each slice and drops a trailing empty slice.
- `search_index`
- `to_num` reads a signed 64-bit integer and detects `0x` and octal
  prefixes when the base is 0.
- `parse_bool` accepts `yes`, `no`, `true` and `false`.

`pixels` has helpers for ARGB colours:

- the channel accessors `get_a`, `get_r`, `get_g` and `get_b`;
- `make_argb`;
- `abgr_to_argb`;
- `alpha_blend`.

It also has the frozen dataclasses `Point`, `Size` and `Rect`.

## Configuration

`ImageList`, `KeyBindings` and `Info` each apply one setting at a time
through `load_config(key, value)`. An unknown key raises `ConfigKeyError`
and a bad value raises `ConfigValueError`.

- **`ImageList`** takes these keys:
  - `order`: `none`, `alpha` or `random`;
  - `loop`, `recursive` and `all`: boolean values.
- **`KeyBindings`** takes a key name as the key. The value is an action name
  that may be followed by parameters, for example key `w` with value
  `zoom width`. The parameters are stored in the binding as given.
- **`Info`** takes these keys:
  - `mode`;
  - `<mode>.<position>`, where the mode is `full` or `brief` and the value
    is a comma-separated list of fields. For example, key `full.topleft`
    with value `name,format,filesize`. `none` and empty items are skipped.

## What this package does not do

It has no image decoders: the caller supplies them. It does not draw pixels,
open a Wayland window, handle input events or read configuration files. It
does not run the commands bound to `exec` either; it only stores them. There
is no command-line program: the package is a library for building a viewer.