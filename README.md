# cwkit

The runtime core of a text user interface toolkit. It covers styles, an
event loop with timeouts, thread primitives and some small text
utilities. It has no dependencies outside the standard library.

## What is in it

- `cwkit.style`: `Style` describes a change to display attributes. A style
  can set the foreground colour and the background colour, and it can set,
  clear or flip attribute bits. Styles compose with `+` and `+=`, and the
  right-hand style is applied on top of the left. The constructors
  `style_fg`, `style_bg`, `style_attrs_on`, `style_attrs_off` and
  `style_attrs_flip` each build a style that makes one change. The
  properties `fg` and `bg` give the colours, and 0 stands for "unset".
  A global registry is reached through `set_style(name, style)` and
  `get_style(name)`. Both store and return copies, and looking up a name
  that was never set returns an empty `Style()`.
- `cwkit.mainloop`: `MainLoop(on_layout, on_update, on_cursor)` and
  `version()`.
  - Events posted from any thread with `post_event` are dispatched in
    order, either by `run()` (which returns after `exit()`) or by `poll()`.
    `poll()` does not wait, and it returns whether any event was
    dispatched.
  - `update()`, `queue_layout()` and `update_cursor()` queue requests, and
    `try_update()` merges them, so each callback runs at most once per
    batch.
  - `add_timeout(event, msecs)` posts an event after a delay. It returns
    -1 for a negative delay. `del_timeout(timeout_id)` cancels a timeout.
  - `suspend()`, `resume()` and `shutdown()` control the loop, and
    `suspend_count()` reports how often it has been suspended. The loop
    can also be used as a context manager, which shuts it down on exit.
  - Callables appended to `main_hook` run after every batch of events.
    `lock` is the lock held while events are dispatched.
- `cwkit.events`: the abstract `Event` class with its `dispatch()` method,
  and `SlotEvent`, which calls a stored callable.
  `TimeoutScheduler(post)` hands events to `post` once their delay has
  passed. It can run its own background thread through `start()` and
  `stop()`, or you can drive it by hand with `check_timeouts()` and
  `first_timeout()`.
- `cwkit.event_queue`: `EventQueue` is an unbounded, thread-safe FIFO.
  It provides `put`, a blocking `get(timeout)` that raises `TimeoutError`,
  `try_get(default)`, `empty()` and `len()`.
- `cwkit.threads`: `Box` holds either nothing or one value. It provides
  `take`, `put`, `try_take`, `try_put`, `update` and `filled()`, and both
  `take` and `put` block and accept a timeout. The module also defines the
  errors `ThreadError`, `ThreadCreateError`, `ThreadJoinError`,
  `ConditionNotLockedError` and `DoubleLockError`.
- `cwkit.errors`: `CWidgetError` is the base error, and it has an
  `errmsg()` method and a `backtrace` property. `AssertionFailure` and
  `eassert(invariant, expression, msg)` raise an error that records the
  caller's file, line and function.
- `cwkit.transcode`: `decode` and `encode` convert between bytes and text,
  using the locale's encoding by default. When input is bad they raise
  `TranscodeError`, and its `partial` holds the result with `?` in place of
  each bad unit. `transcode` converts either way without raising and hands
  failures to an error handler, which by default returns the partial
  result.
- `cwkit.formatting`: `ssprintf` and `swsprintf` do printf-style
  formatting, and `sstrerror(errnum)` describes an error code.
- `cwkit.i18n`: `translate` looks text up in the `libcwidget3` message
  catalogue. `strip_context` translates and then drops everything up to
  the first `|`.
- `cwkit.slots`: `SlotArg` and `arg` wrap optional callbacks.
  `accumulate_and` and `accumulate_or` are short-circuiting boolean folds.

## Example

```python
from cwkit.events import SlotEvent
from cwkit.mainloop import MainLoop
from cwkit.style import get_style, set_style, style_attrs_on, style_bg, style_fg

BOLD = 1 << 21

set_style("Error", style_fg(7) + style_bg(1) + style_attrs_on(BOLD))
error = get_style("Error")
print(error.fg, error.bg)  # 7 1

with MainLoop(on_layout=None, on_update=None, on_cursor=None) as loop:
    loop.post_event(SlotEvent(lambda: print("hello")))
    loop.post_event(SlotEvent(loop.exit))
    loop.run()

    timeout_id = loop.add_timeout(SlotEvent(loop.exit), 500)
    loop.del_timeout(timeout_id)
```

## What it does not do

There are no widgets, no terminal drawing, no keyboard or mouse input and
no signal handling here. `MainLoop` calls the layout, update and cursor
callbacks you give it, and drawing the screen is left to those callbacks.
The package has no command-line program.

## Running the tests

```
pip install cwkit[test]
pytest
```