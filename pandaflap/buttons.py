"""Two-button input model with edge-triggered press and click events."""

from __future__ import annotations

from collections.abc import Iterator

LEFT_PIN = 32
RIGHT_PIN = 33

LEFT_ID = "left"
RIGHT_ID = "right"

CLICK_MS = 200
DEBOUNCE_MS = 15


class Button:
    """A push button whose press and click events are consumed once each."""

    def __init__(self, pin: int) -> None:
        self.pin = pin
        self._press = False
        self._press_already_started = False
        self._has_clicked = False

    def on_press(self) -> None:
        """Record that the button went down."""
        self._press = True

    def on_click(self) -> None:
        """Record a completed click; this also re-arms the press edge."""
        self._press_already_started = False
        self._has_clicked = True

    def consume_press(self) -> bool:
        """Return True once for the first press until the next click."""
        initial_press = self._press and not self._press_already_started
        if initial_press:
            self._press_already_started = True
        self._press = False
        return initial_press

    def consume_click(self) -> bool:
        """Return True if a click is pending, clearing it."""
        clicked = self._has_clicked
        self._has_clicked = False
        return clicked

    def reset(self) -> None:
        """Forget every pending event."""
        self._has_clicked = False
        self._press = False
        self._press_already_started = False


class ButtonPanel:
    """The left and right buttons, looked up by name."""

    def __init__(self) -> None:
        self._buttons: dict[str, Button] = {
            LEFT_ID: Button(LEFT_PIN),
            RIGHT_ID: Button(RIGHT_PIN),
        }

    def __getitem__(self, name: str) -> Button:
        return self._buttons[name]

    def __iter__(self) -> Iterator[Button]:
        return iter(self._buttons.values())

    def __len__(self) -> int:
        return len(self._buttons)

    def reset(self) -> None:
        """Reset every button on the panel."""
        for button in self:
            button.reset()