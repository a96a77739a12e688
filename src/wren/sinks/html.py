"""HTML error sink — out-of-band fragments for htmx partial updates.

Each effective command renders one element carrying ``hx-swap-oob`` so a
single blur response can update the field's message slot and the form's
status element together::

    sink = HtmlErrorSink()
    form = FormValidator(request_values, sink, scope="signup")
    form.validate_zip("zip", required=True)
    return sink.drain()
    # <div id="zip-message" class="messages error messages-inline"
    #      hx-swap-oob="true">This field is required</div>
    # <div id="signup-status" class="form-error-state" hx-swap-oob="true"></div>

Repeating a command that changes nothing renders nothing. The first clear
of a field or a scope always renders an empty element, whether or not this
sink put anything there.
"""

import logging
from collections.abc import Hashable

from kida import Environment

from wren._internal.types import FieldRef
from wren.config import ValidatorConfig

logger = logging.getLogger("wren.sinks")

_MESSAGE_SOURCE = (
    '<div id="{{ target }}"{% if message %} class="{{ css }}"{% end %}'
    ' hx-swap-oob="true">{{ message }}</div>'
)

_STATUS_SOURCE = (
    '<div id="{{ target }}"{% if active %} class="{{ css }}"{% end %}'
    ' hx-swap-oob="true"></div>'
)


class HtmlErrorSink:
    """Error sink that renders kida fragments and queues them for a response."""

    __slots__ = ("_config", "_message_tpl", "_messages", "_pending", "_scopes", "_status_tpl")

    def __init__(
        self,
        config: ValidatorConfig | None = None,
        env: Environment | None = None,
    ) -> None:
        self._config = config or ValidatorConfig()
        if env is None:
            env = Environment(autoescape=self._config.autoescape)
        self._message_tpl = env.from_string(_MESSAGE_SOURCE)
        self._status_tpl = env.from_string(_STATUS_SOURCE)
        # field -> message shown; "" means the slot is known to be empty
        self._messages: dict[FieldRef, str] = {}
        # scope -> status shown; False means the status is known to be clear
        self._scopes: dict[Hashable, bool] = {}
        self._pending: list[str] = []

    def set_error(self, field: FieldRef, message: str) -> None:
        if self._messages.get(field) == message:
            return
        self._messages[field] = message
        self._emit_message(field, message)

    def clear_error(self, field: FieldRef) -> None:
        # A field this sink never saw may hold server-rendered markup, so its
        # first clear always renders an empty slot.
        if self._messages.get(field) == "":
            return
        self._messages[field] = ""
        self._emit_message(field, "")

    def set_scope_error(self, scope: Hashable) -> None:
        if self._scopes.get(scope) is True:
            return
        self._scopes[scope] = True
        self._emit_status(scope, active=True)

    def clear_scope_error(self, scope: Hashable) -> None:
        # Same as clear_error: the first clear resets a server-rendered status.
        if self._scopes.get(scope) is False:
            return
        self._scopes[scope] = False
        self._emit_status(scope, active=False)

    @property
    def pending(self) -> tuple[str, ...]:
        """Fragments rendered since the last ``drain()``."""
        return tuple(self._pending)

    def drain(self) -> str:
        """Return queued fragments as one HTML string and empty the queue."""
        html = "\n".join(self._pending)
        self._pending.clear()
        return html

    # -- internals --

    def _emit_message(self, field: FieldRef, message: str) -> None:
        target = f"{field}{self._config.message_id_suffix}"
        html = self._message_tpl.render(
            {"target": target, "css": self._config.message_class, "message": message}
        )
        logger.debug("render message slot %s", target)
        self._pending.append(html)

    def _emit_status(self, scope: Hashable, *, active: bool) -> None:
        target = f"{scope}{self._config.status_id_suffix}"
        html = self._status_tpl.render(
            {"target": target, "css": self._config.scope_error_class, "active": active}
        )
        logger.debug("render scope status %s active=%s", target, active)
        self._pending.append(html)
