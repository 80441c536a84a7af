# semagroup

`semagroup` provides `Group` (in `semagroup.group`), a thread-safe counter
that is both a wait group and a weighted semaphore:

- with a size of 0 (the default) it behaves like a wait group: reservations
  never block, and `wait()` returns once everything reserved has been freed;
- with a positive size it also caps how many units may be active at once,
  so `reserve()` and `reserve_n()` block until enough room has been freed.
  Blocked reservations are granted in the order they arrived.

It is meant for concurrent threaded tasks of roughly equal weight or cost.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Usage

### As a wait group

```python
import threading
from semagroup.group import Group

group = Group()

def work():
    try:
        ...  # do some work
    finally:
        group.free()

for _ in range(10):
    group.reserve()
    threading.Thread(target=work).start()

group.wait()  # blocks until every reservation has been freed
```

### With a concurrency limit

```python
import threading
from semagroup.group import Group

group = Group(10)           # at most 10 units active at a time
cancel = threading.Event()  # set it to abort pending reservations

for _ in range(10):
    if group.reserve_n(cancel, 5):   # blocks while there is no room
        threading.Thread(target=lambda: group.free_n(5)).start()

group.wait()
```

A group created without a size can be given one later with `set_size(size)`,
once, before it is used. A size of 0 or less means no limit.

`reserve_n(done, n)` returns `True` once `n` units have been reserved, or
`False` if `done` was set first; in that case nothing is left counted as
pending. `done` is optional and may be any object with `is_set()` and
`wait()` methods, such as a `threading.Event`. If `done` is already set, the
call returns `False` at once. A request larger than the group size can never
succeed: it returns `False` once `done` is set (and, without `done`, blocks
forever).

`try_reserve_n(n)` never blocks: it returns `False` if there is no room or if
other callers are already waiting. On a group without a limit it always
succeeds.

### Waiting with a timeout

`wait(timeout=None)` blocks until both the active and pending counts reach
zero, and returns `False` if the timeout ran out first. `wait_event()` returns
a `threading.Event` that is set once the group reaches zero (already set if it
is zero now), for callers that want to combine it with other waiting logic.

### As a context manager

Entering a `with` block reserves one unit and leaving it frees that unit.

```python
with group:
    ...  # runs while holding one unit of the group
```

### Inspecting the group

- `size()` is the concurrency limit (0 means unlimited);
- `active_count()` is the number of units currently reserved;
- `pending_count()` is the number of units requested by blocked reservations.

### Errors

- `GroupError` (a `RuntimeError`) is raised when freeing more than was
  reserved, and when `set_size()` is called on a group that already has a
  positive size or is already in use.
- `ValueError` is raised when reserving or freeing zero or a negative amount,
  and for a size larger than 2**32 - 1.

## Examples

`semagroup.examples` holds small demonstrations: `wait_group_example`,
`select_wait_example`, `blocking_reserve_example`, and `fetch_all`, which
calls a given function on a list of URLs concurrently and returns the results
in order. They can be run from the command line:

```
semagroup-examples wait-group
semagroup-examples select-wait --workers 20 --timeout 5
semagroup-examples blocking-reserve
```

Each command logs its work and prints its result: the number of jobs that ran,
or, for `select-wait`, whether every job finished before the timeout.

## Scope

`Group` works with threads only; it offers no asyncio interface.