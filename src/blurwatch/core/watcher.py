"""
Debounced watcher for a single settings file
"""

import logging
import os
import threading
import time
from pathlib import Path
from typing import Callable, Optional

from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler, FileSystemEvent

log = logging.getLogger(__name__)

DEFAULT_COOLDOWN = 8.0


class DebouncedChangeHandler(FileSystemEventHandler):
    """Event handler that runs a callback for changes of one file.

    Events arriving within ``cooldown`` seconds of the last accepted one
    are skipped. This also swallows the events caused by the callback
    rewriting the file itself.
    """

    def __init__(self, settings_path: str, callback: Callable[[], None],
                 cooldown: float = DEFAULT_COOLDOWN,
                 clock: Callable[[], float] = time.monotonic):
        super().__init__()
        self.settings_path = os.path.normcase(os.path.abspath(settings_path))
        self.callback = callback
        self.cooldown = cooldown
        self.clock = clock
        self.last_trigger: Optional[float] = None
        self.error: Optional[BaseException] = None
        self.lock = threading.Lock()

    def _is_target(self, path) -> bool:
        if isinstance(path, bytes):
            path = os.fsdecode(path)
        return os.path.normcase(os.path.abspath(path)) == self.settings_path

    def on_any_event(self, event: FileSystemEvent):
        """Route events for the watched file to on_any_change"""
        if event.is_directory or event.event_type not in ('modified', 'created', 'moved'):
            return
        path = event.dest_path if event.event_type == 'moved' else event.src_path
        if self._is_target(path):
            self.on_any_change()

    def on_any_change(self) -> bool:
        """Run the callback unless still cooling down. Returns True if it ran."""
        with self.lock:
            now = self.clock()
            if self.last_trigger is not None and now - self.last_trigger < self.cooldown:
                log.info("skipping")
                return False
            self.last_trigger = now

            try:
                self.callback()
            except Exception as e:
                self.error = e
                log.error(f"Error processing {self.settings_path}: {e}")
            return True


class SettingsFileWatcher:
    """Watch one settings file and run a callback when it changes"""

    def __init__(self, settings_path: str, callback: Callable[[], None],
                 cooldown: float = DEFAULT_COOLDOWN):
        """Initialize the watcher

        Args:
            settings_path: File to watch
            callback: Called with no arguments after an accepted change
            cooldown: Seconds during which further changes are ignored
        """
        self.settings_path = Path(settings_path).resolve()
        self.observer = Observer()
        self.event_handler = DebouncedChangeHandler(
            str(self.settings_path),
            callback,
            cooldown=cooldown,
        )

    def start(self):
        """Start watching for changes"""
        # Editors often save by replacing the file, so watch its directory
        self.observer.schedule(
            self.event_handler,
            path=str(self.settings_path.parent),
            recursive=False
        )
        self.observer.start()

    def stop(self):
        """Stop watching for changes"""
        self.observer.stop()
        self.observer.join()

    def is_alive(self) -> bool:
        """Check if the watcher is currently running"""
        return self.observer.is_alive()

    @property
    def error(self) -> Optional[BaseException]:
        """Last error raised by the callback, if any"""
        return self.event_handler.error

    def clear_error(self):
        self.event_handler.error = None
