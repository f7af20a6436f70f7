# evilwm

Building blocks for a window manager built around an infinite shared canvas.
Windows live at world coordinates on an unbounded plane, and every output
looks at that plane through a camera that can be panned and zoomed.

The package uses only the standard library.

## Modules

- `evilwm.geometry`: `Point`, `Vec2`, `Size` and `Rect` (frozen dataclasses).
  `Point - Point` gives a `Vec2`, `Point + Vec2` and `Point - Vec2` give a
  `Point`, and `Vec2` supports `+`, `-`, `*` by a number and `/` by a number.
  Dividing by a value whose magnitude is at most machine epsilon gives a zero
  vector. `Rect.from_xywh` builds a rectangle and `Rect.center` returns its
  centre.
- `evilwm.viewport`: `Viewport`, the camera. It converts between screen and
  world coordinates (`screen_to_world`, `world_to_screen`), reports the
  visible world rectangle, pans in world or screen space (`pan_world`,
  `pan_screen`), centres on a world point (`center_on`), zooms around a screen
  anchor (`zoom_at_screen`) and fits a rectangle into view (`fit_rect`). Zoom
  is clamped to limits, 0.1 to 8.0 by default.
- `evilwm.momentum`: `Momentum`, a velocity that decays exponentially with
  friction and snaps to zero once its length falls to the stop threshold.
- `evilwm.transfer_report`: command-line parsing (`parse_args`, `usage`,
  `ProbeArgs`, `ProbeArgumentError`) and JSON reports for clipboard,
  primary-selection and drag-and-drop transfer checks. `SelectionSourceSummary`,
  `SelectionSinkSummary`, `DndSourceSummary` and `DndTargetSummary` each report
  the stage reached (`stage()`) and a JSON-ready dictionary (`to_json(mode, mime)`).
  `emit_json` prints a value as indented JSON with sorted keys and returns the text.
- `evilwm.ipc_paths`: `make_ipc_socket_path` for unique per-process socket
  paths under `$XDG_RUNTIME_DIR` (or the temporary directory),
  `validate_screenshot_path`, which accepts only paths whose existing parent
  lies under `$HOME` or the temporary directory, `check_request_size` against
  `MAX_IPC_REQUEST_BYTES` (1 MiB), and `error_response_json`.
- `evilwm.eventlog`: `EventLog`, a JSON Lines log of events with sequence
  numbers and elapsed milliseconds, and `IpcTrace`, which appends raw IPC
  requests and responses to `requests.jsonl` and `responses.jsonl` in a
  directory. Both do nothing when given no path. Helpers:
  `initialize_jsonl_file`, `append_jsonl`, `initialize_ipc_trace_dir` and
  `format_live_hook_error`.
- `evilwm.input_policy`: `ModifierSet` and `modifier_set_json`,
  `pinch_relative_factor`, `scroll_amount` (v120 wheel units at 15 pixels per
  notch), `pointer_zoom_factor` and `should_apply_pointer_focus_fallback`.

## Examples

The camera:

```python
from evilwm.geometry import Point, Rect, Size, Vec2
from evilwm.viewport import Viewport

camera = Viewport(Size(1280.0, 720.0))

# Zoom in 2x around the middle of the screen; the world point under the
# anchor stays where it is on screen.
camera.zoom_at_screen(Point(640.0, 360.0), 2.0)

# Drag the canvas by 100 screen pixels to the right.
camera.pan_screen(Vec2(100.0, 0.0))

world = camera.screen_to_world(Point(0.0, 0.0))
screen = camera.world_to_screen(world)   # back to (0, 0)

# Frame a window with 40 units of padding around it.
camera.fit_rect(Rect.from_xywh(2000.0, 500.0, 800.0, 600.0), 40.0)
print(camera.visible_world_rect())
```

`try_with_zoom_limits` returns a copy with new limits and raises `ValueError`
when they are invalid; `with_zoom_limits` returns an unchanged copy instead.

```python
camera = Viewport(Size(800.0, 600.0)).with_zoom_limits(0.5, 4.0)
```

Kinetic panning:

```python
from evilwm.geometry import Vec2
from evilwm.momentum import Momentum

momentum = Momentum(friction=4.0, stop_threshold=1.0)
momentum.velocity = Vec2(600.0, 0.0)
while not momentum.is_stopped():
    camera.pan_world(momentum.step(1 / 60))
```

Pinch zoom, one update at a time:

```python
from evilwm.input_policy import pinch_relative_factor

remembered, factor = pinch_relative_factor(None, 1.0)      # factor is None
remembered, factor = pinch_relative_factor(remembered, 1.5)  # factor == 1.5
```

Transfer reports:

```python
from evilwm.transfer_report import SelectionSinkSummary

summary = SelectionSinkSummary(
    received_mimes=["text/plain;charset=utf-8"],
    offer_received=True,
    receive_requested=True,
    payload_read_finished=True,
    chosen_mime="text/plain;charset=utf-8",
    payload=b"hello",
)
report = summary.to_json("clipboard-sink", "text/plain;charset=utf-8")
assert report["stage"] == "payload_read_finished"
assert report["success"] is True
```

## What this package does not do

It is a library of pieces, not a running window manager. It has no display
server connection, renderer or event loop, opens no IPC socket, starts no
client programs, and installs no commands. The transfer report module parses
arguments and formats results but does not itself talk to a clipboard or
perform a drag. Pointer-driven move and resize operations are not tracked here.

## Running the tests

Install the `test` extra and run pytest from the project directory.