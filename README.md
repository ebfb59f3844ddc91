# demokit

Small, self-contained models of classic interactive demos. Each one keeps its
state in plain Python objects and renders to HTML or SVG strings, so it can be
driven from tests, a terminal or any web framework.

## What is inside

- `demokit.vector`: the immutable `Vector2D` (`from_polar`, `magnitude`,
  `magnitude_squared`, `clamp_magnitude`, `angle`, arithmetic operators), plus
  `smallest_angle_between`, `mean` and `weighted_mean`.
- `demokit.boids_settings`: `Settings`, the frozen set of flocking parameters,
  with `load`, `store`, `remove` and `replace`. `load` falls back to the
  defaults when nothing valid is stored.
- `demokit.boid`: `Boid` (`random`, `update`, `render`), `VisibleBoid`,
  `visible_boids`, `update_all` and `shape_points`. Boids follow cohesion,
  separation, alignment, colour adaption and border avoidance.
- `demokit.simulation`: `Simulation` (`tick`, `restart`, `render` to SVG) and
  `BoidsApp`, which holds settings, a pause flag and a restart counter
  (`change_settings`, `reset_settings`, `restart`, `toggle_pause`,
  `pause_label`).
- `demokit.slider`: `Slider`, a labelled range input with `display_value`,
  `effective_step` and `render`.
- `demokit.life`: Conway's Game of Life on a wrapping grid (`Life`, `Cell`,
  `CellState`, and the rule helpers `alone`, `overpopulated`,
  `can_be_revived`).
- `demokit.todo`: an immutable `TodoState` with `Entry` and `Filter`; every
  action returns a new state, and entries can be saved to and loaded from a
  store.
- `demokit.memory`: a card-matching game: `MemoryState` (`reset`,
  `flip_card`, `rollback`, `try_save_best_score`), `shuffle_cards`,
  `card_image`, `CardName`, `Status`, `Card` and `RawCard`.
- `demokit.randomness`: `chance`, `range_exclusive`,
  `choose_two_distinct_indices` and `swap_two_distinct`.
- `demokit.person` and `demokit.keyed_list`: randomly generated `Person`
  records and `PersonList`, which creates, prepends, deletes, swaps, reverses
  and sorts them.
- `demokit.password`: `generate_password`, 17 characters from a fixed
  alphabet.
- `demokit.markdown_view`: `render_markdown` turns Markdown (tables enabled)
  into an `Element` tree with presentation classes; `Element.to_html` writes
  it out.
- `demokit.hovered`: `Hovered` and `HoverKind`, describing what the pointer is
  over in a nested list.
- `demokit.storage`: `JsonStorage`, a JSON key-value store kept in memory, or
  in a file when given a path.

All functions that involve chance take an optional `random.Random`, so results
can be made repeatable by passing a seeded one.

## Installing

Install the package with its one dependency, `markdown-it-py`. The `test`
extra adds `pytest` for running the test suite in `tests/`.

## Examples

Game of Life:

```python
from demokit.life import Life

life = Life()          # 53 x 40 cells, all dead
life.toggle(0)
life.step()
print(life.render())
```

Boids:

```python
import random

from demokit.boids_settings import Settings
from demokit.simulation import Simulation

simulation = Simulation(Settings(boids=50), rng=random.Random(1))
simulation.tick()
svg = simulation.render()
```

Todo list:

```python
from demokit.todo import Filter, TodoState

state = TodoState().add("write docs").add("ship it")
state = state.toggle(1).set_filter(Filter.ACTIVE)
print([entry.description for entry in state.visible()])   # ['ship it']
```

Persisting settings:

```python
from demokit.boids_settings import Settings
from demokit.storage import JsonStorage

storage = JsonStorage("settings.json")
Settings(max_speed=10.0).store(storage)
print(Settings.load(storage).max_speed)   # 10.0
```

Markdown:

```python
from demokit.markdown_view import render_markdown

print(render_markdown("# Title\n\nSome *text*.").to_html())
```

## What it does not do

demokit has no command-line program, window or browser front end, and no
timers: the caller decides when to call `tick`, `step` or any other action.
The markup it produces is plain strings with no event handling attached.
`render_markdown` works on text it is given and fetches nothing over the
network.