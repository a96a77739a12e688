"""Error sinks — where field and scope error commands land.

Two implementations ship with wren::

    from wren.sinks import HtmlErrorSink, RecordingSink

``RecordingSink`` keeps display state in memory (tests, non-HTML hosts).
``HtmlErrorSink`` renders htmx out-of-band fragments with kida; it is
imported on first access, so hosts that never render HTML never load kida.

Any object with ``set_error``, ``clear_error``, ``set_scope_error`` and
``clear_scope_error`` satisfies ``ErrorSink``.
"""

from wren.sinks.memory import RecordingSink
from wren.sinks.protocol import ErrorSink

__all__ = [
    "ErrorSink",
    "HtmlErrorSink",
    "RecordingSink",
]


def __getattr__(name: str) -> object:
    if name == "HtmlErrorSink":
        from wren.sinks.html import HtmlErrorSink

        return HtmlErrorSink
    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
