"""
sinks.py

Contracts for the collaborators the game core talks to (presentation,
audio, system log, score display) plus do-nothing implementations used
when a collaborator is absent.
"""

import logging
from collections import deque
from typing import Callable, Deque, List, Optional, Protocol

logger = logging.getLogger(__name__)


class Presenter(Protocol):
    """Modal dialogs and the score readout"""
    modal_open: bool

    def show_modal(self, title: str, body: str, button_label: str,
                   on_confirm: Callable[[], None]) -> None: ...

    def hide_modal(self) -> None: ...

    def show_score(self, text: str) -> None: ...


class AudioSink(Protocol):
    """Fire-and-forget sound; failures never reach the caller"""
    def play_effect(self, name: str) -> None: ...

    def start_ambient(self) -> None: ...

    def stop_ambient(self) -> None: ...


class NullPresenter:
    """Remembers what it was asked to show; draws nothing"""
    def __init__(self):
        self.modal_open = False
        self.modal: Optional[tuple] = None
        self.score_text = "0000"

    def show_modal(self, title, body, button_label, on_confirm) -> None:
        self.modal = (title, body, button_label, on_confirm)
        self.modal_open = True

    def hide_modal(self) -> None:
        self.modal_open = False

    def confirm(self) -> None:
        """Press the modal's button"""
        if self.modal_open and self.modal is not None:
            on_confirm = self.modal[3]
            self.hide_modal()
            on_confirm()

    def show_score(self, text: str) -> None:
        self.score_text = text


class NullAudio:
    def play_effect(self, name: str) -> None:
        pass

    def start_ambient(self) -> None:
        pass

    def stop_ambient(self) -> None:
        pass


class SystemLog:
    """
    Short scrolling message list shown next to the board.
    Only the newest ``capacity`` entries are kept.
    """
    def __init__(self, capacity: int = 10):
        self.entries: Deque[str] = deque(maxlen=capacity)

    def log(self, message: str) -> None:
        self.entries.append(f"> {message}")
        logger.info(message)

    def lines(self) -> List[str]:
        return list(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
